"""Tests for typeorm_extender.modules.database.loader module."""

import sys

import pytest

from typeorm_extender.modules.database.loader import (
    MODULE_PREFIX,
    load_module,
    project_imports,
)


@pytest.fixture
def project(tmp_path):
    package = tmp_path / "src" / "entities"
    package.mkdir(parents=True)
    (tmp_path / "src" / "__init__.py").touch()
    (package / "__init__.py").touch()
    (package / "color.py").write_text('NAME = "color"\n')
    return tmp_path


def test_project_root_is_importable_inside_block(project):
    with project_imports(project):
        from src.entities.color import NAME  # pylint: disable=import-error

        assert NAME == "color"
        assert str(project.resolve()) in sys.path

    assert str(project.resolve()) not in sys.path


def test_project_modules_are_dropped_after_block(project):
    with project_imports(project):
        module = load_module(project / "src" / "entities" / "color.py")
        __import__("src.entities.color")
        assert module.__name__ in sys.modules

    assert module.__name__ not in sys.modules
    assert "src.entities.color" not in sys.modules
    assert "src" not in sys.modules


def test_load_module_names_are_unique(project):
    path = project / "src" / "entities" / "color.py"
    with project_imports(project):
        first = load_module(path)
        second = load_module(path)

    assert first.__name__ != second.__name__
    assert first.__name__.startswith(MODULE_PREFIX)
    assert first.NAME == second.NAME == "color"


def test_load_module_failure_is_not_registered(tmp_path):
    path = tmp_path / "broken.py"
    path.write_text("raise ValueError('broken')\n")
    before = set(sys.modules)

    with pytest.raises(ValueError):
        load_module(path)

    assert set(sys.modules) - before == set()
