from gridslide.main import app

app(prog_name="gridslide")
