from mathops.cli import app

app(prog_name="mathops")
