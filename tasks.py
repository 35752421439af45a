import shutil
import subprocess

from invoke import task
from pathlib import Path

DOCS_DIR = Path("./docs")
DOCS_DEPLOY_DIR = Path("./public")


@task
def test(c, cov=False):
    """ Run the test suite """

    args = ["pytest", "tests"]
    if cov:
        args += ["--cov=poromat", "--cov-report=term-missing"]

    print("Running tests...")
    c.run(" ".join(args), pty=True)


@task
def doctest(c):
    """ Run the examples embedded in the docstrings """

    c.run("pytest --doctest-modules poromat", pty=True)


@task
def docs(c):
    """ This command generates the HTML of the documentation """

    dest_dir = DOCS_DIR / "build"
    source_dir = DOCS_DIR / "source"
    SPHINX_BUILD = ["sphinx-build", source_dir, dest_dir]

    subprocess.run(SPHINX_BUILD, check=True)

    if DOCS_DEPLOY_DIR.exists():
        shutil.rmtree(DOCS_DEPLOY_DIR)
    shutil.copytree(dest_dir, DOCS_DEPLOY_DIR)
