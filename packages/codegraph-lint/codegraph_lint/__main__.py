from codegraph_lint.cli import app

app()
