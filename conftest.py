import pathlib


def pytest_ignore_collect(collection_path, config):
    # Accept both py.path.local (pytest<9) and pathlib.Path (pytest>=9)
    p = pathlib.Path(str(collection_path))
    # Ignore virtualenvs, build output and generated locale files
    for part in p.parts:
        if part in {".venv", "venv", "dist", "build", "locales"}:
            return True
    return False
