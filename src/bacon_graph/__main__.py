from bacon_graph.main import app

app()
