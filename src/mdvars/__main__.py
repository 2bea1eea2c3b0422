from mdvars.cli.main import app

app(prog_name="mdvars")
