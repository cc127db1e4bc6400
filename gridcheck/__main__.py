from gridcheck.cli import app

app()
