"""Tests for typeorm_extender.modules.database.seeds module."""

from textwrap import dedent

import pytest
from sqlalchemy import create_engine, text

from typeorm_extender.core.errors import SeedError
from typeorm_extender.modules.database import SeedRunner, resolve_seeds_dir
from typeorm_extender.modules.database.seeds import find_seed_files

SEED_SOURCE = dedent(
    """\
    from sqlalchemy import text


    class {class_name}:
        def __init__(self, engine):
            self.engine = engine

        def run(self, session):
            session.execute(text("INSERT INTO colors (name) VALUES ('{value}')"))


    SEED = {class_name}
    """
)


def write_seed(directory, file_name, class_name, value):
    (directory / file_name).write_text(
        SEED_SOURCE.format(class_name=class_name, value=value)
    )


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'seed.sqlite'}")
    with engine.begin() as connection:
        connection.execute(text("CREATE TABLE colors (name VARCHAR(20))"))
    yield engine
    engine.dispose()


@pytest.fixture
def seeds_dir(tmp_path):
    directory = tmp_path / "src" / "seeds"
    directory.mkdir(parents=True)
    (directory / "base_seed.py").write_text("class BaseSeed:\n    pass\n")
    (directory / "helpers.py").write_text("")
    write_seed(directory, "red_seed.py", "RedSeed", "red")
    write_seed(directory, "blue_seed.py", "BlueSeed", "blue")
    return directory


def colors(engine):
    with engine.connect() as connection:
        return [row.name for row in connection.execute(text("SELECT name FROM colors"))]


def test_find_seed_files_sorted_without_base(seeds_dir):
    assert [p.name for p in find_seed_files(seeds_dir)] == [
        "blue_seed.py",
        "red_seed.py",
    ]


def test_find_seed_files_filter_ignores_case(seeds_dir):
    assert [p.name for p in find_seed_files(seeds_dir, "RED")] == ["red_seed.py"]
    assert find_seed_files(seeds_dir, "green") == []


def test_find_seed_files_missing_directory(tmp_path):
    assert find_seed_files(tmp_path / "nope") == []


def test_run_executes_all_in_order(engine, seeds_dir, tmp_path):
    runner = SeedRunner(engine, seeds_dir, project_root=tmp_path)

    assert runner.run() == ["blue_seed", "red_seed"]
    assert colors(engine) == ["blue", "red"]


def test_run_only_matching(engine, seeds_dir, tmp_path):
    runner = SeedRunner(engine, seeds_dir, project_root=tmp_path)

    assert runner.run(only="red") == ["red_seed"]
    assert colors(engine) == ["red"]


def test_missing_seed_attribute(engine, seeds_dir, tmp_path):
    (seeds_dir / "orphan_seed.py").write_text("class OrphanSeed:\n    pass\n")
    runner = SeedRunner(engine, seeds_dir, project_root=tmp_path)

    with pytest.raises(SeedError) as exc_info:
        runner.run_seed(seeds_dir / "orphan_seed.py")

    assert exc_info.value.variables == {"name": "orphan_seed"}
    assert exc_info.value.message_key == "errors.seedFailed"


def test_failing_seed_rolls_back(engine, seeds_dir, tmp_path):
    (seeds_dir / "broken_seed.py").write_text(
        dedent(
            """\
            from sqlalchemy import text


            class BrokenSeed:
                def __init__(self, engine):
                    pass

                def run(self, session):
                    session.execute(text("INSERT INTO colors (name) VALUES ('x')"))
                    raise ValueError("bad data")


            SEED = BrokenSeed
            """
        )
    )
    runner = SeedRunner(engine, seeds_dir, project_root=tmp_path)

    with pytest.raises(SeedError) as exc_info:
        runner.run_seed(seeds_dir / "broken_seed.py")

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert colors(engine) == []


def test_resolve_seeds_dir_explicit(tmp_path):
    assert resolve_seeds_dir(tmp_path, "custom", explicit=True) == tmp_path / "custom"


def test_resolve_seeds_dir_falls_back_to_conventional(tmp_path):
    (tmp_path / "seeds").mkdir()
    assert resolve_seeds_dir(tmp_path, "src/seeds") == tmp_path / "seeds"


def test_resolve_seeds_dir_prefers_configured(tmp_path):
    (tmp_path / "seeds").mkdir()
    (tmp_path / "db" / "seeds").mkdir(parents=True)
    assert resolve_seeds_dir(tmp_path, "db/seeds") == tmp_path / "db" / "seeds"


def test_resolve_seeds_dir_nothing_exists(tmp_path):
    assert resolve_seeds_dir(tmp_path, "src/seeds") == tmp_path / "src" / "seeds"
