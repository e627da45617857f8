from .cli import app

app(prog_name='short-id')
