from lispy.cli import app

app(prog_name="lispy")
