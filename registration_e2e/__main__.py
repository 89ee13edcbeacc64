from registration_e2e.cli import app

app()
