from invoke import task


@task
def format(c):
    c.run("black pathfinder tests cli.py gui.py tasks.py && isort pathfinder tests cli.py gui.py tasks.py")


@task
def install(c):
    c.run(
        "pip-compile -v --rebuild -o requirements.txt --trusted-host pypi.org --trusted-host pypi.python.org --trusted-host files.pythonhosted.org pyproject.toml"
    )
    c.run("pip-sync requirements.txt")


@task
def test(c):
    c.run("pytest tests")


@task
def run(c, map="maps/default.pathmap", report=""):
    c.run(f"python cli.py {map}" + (f" --report {report}" if report else ""))
