from os import getcwd
from os.path import exists, join, dirname
import sys

from invoke import task, Context

project_folder = dirname(__file__)

sources = (
    join(project_folder, "hargs"),
    join(project_folder, "tests"),
)

env_path = join(getcwd(), ".venv")


def venv_python() -> str:
    if sys.platform == "win32":
        return join(env_path, "Scripts", "python.exe")
    return join(env_path, "bin", "python")


@task
def configure(c: Context, dev=False, clean=False):
    python = venv_python()

    if clean and exists(env_path):
        c.run(f"{sys.executable} -c \"import shutil; shutil.rmtree({env_path!r})\"")

    if not exists(python) or clean:
        c.run(f"{sys.executable} -m venv {env_path}")

    c.run(f"{python} -m pip install --upgrade pip")

    if dev:
        c.run(f"{python} -m pip install --editable {project_folder}[dev,types,test]")
    else:
        c.run(f"{python} -m pip install {project_folder}")


@task()
def format(c: Context) -> None:
    c.run(f"{venv_python()} -m ruff format {' '.join(sources)}")


@task()
def lint(c: Context) -> None:
    python = venv_python()

    c.run(f"{python} -m mypy {sources[0]}")
    c.run(f"{python} -m ruff check --respect-gitignore {' '.join(sources)}")
    c.run(f"{python} -m ruff format --respect-gitignore --check --diff {' '.join(sources)}")


@task()
def test(c: Context, verbose=False) -> None:
    flags = "-v" if verbose else "-q"
    c.run(f"{venv_python()} -m pytest {flags} {sources[1]}")
