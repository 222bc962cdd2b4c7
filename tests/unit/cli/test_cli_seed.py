"""Tests for the ``seed:*`` and ``factory:create`` commands."""

from textwrap import dedent

from sqlalchemy import create_engine, text

COLOR_SEED = dedent(
    """\
    from sqlalchemy import text

    from src.seeds.base_seed import BaseSeed


    class ColorSeed(BaseSeed):
        def run(self, session):
            session.execute(text("CREATE TABLE IF NOT EXISTS colors (name TEXT)"))
            session.execute(text("INSERT INTO colors (name) VALUES ('red')"))


    SEED = ColorSeed
    """
)


def count_colors(root):
    engine = create_engine(f"sqlite:///{root / 'database.sqlite'}")
    try:
        with engine.connect() as connection:
            return connection.execute(text("SELECT COUNT(*) FROM colors")).scalar()
    finally:
        engine.dispose()


class TestFactoryCreate:
    def test_with_entity(self, run_cli, sqlite_project):
        result = run_cli(["factory:create", "UserFactory"])

        assert result.exit_code == 0, result.output
        assert (sqlite_project / "src/factories/user_factory.py").is_file()
        assert "✅ Factory UserFactory created successfully!" in result.output
        assert "📄 File: src/factories/user_factory.py" in result.output
        assert "3. Example: user = UserFactory(session).create()" in result.output
        assert "not found" not in result.output
        assert "using UserFactory" not in result.output

    def test_name_is_normalized(self, run_cli, sqlite_project):
        result = run_cli(["factory:create", "user"])

        assert result.exit_code == 0, result.output
        assert '⚠️ Factory names end with "Factory", using UserFactory' in result.output

    def test_missing_entity(self, run_cli, sqlite_project):
        result = run_cli(["factory:create", "Order", "--dir", "lib/factories"])

        assert result.exit_code == 0, result.output
        assert "📁 Directory created: lib/factories" in result.output
        assert "⚠️ Entity 'Order' not found" in result.output
        assert (sqlite_project / "lib/factories/order_factory.py").is_file()

    def test_existing_file(self, run_cli, sqlite_project):
        run_cli(["factory:create", "User"])
        result = run_cli(["factory:create", "User"])

        assert result.exit_code == 1
        assert "❌ Error creating factory:" in result.output
        assert "❌ File already exists: src/factories/user_factory.py" in result.output


class TestSeedCreate:
    def test_without_factory(self, run_cli, sqlite_project):
        result = run_cli(["seed:create", "Demo"])

        assert result.exit_code == 0, result.output
        assert (sqlite_project / "src/seeds/demo_seed.py").is_file()
        assert "✅ Seed DemoSeed created successfully!" in result.output
        assert '⚠️ Seed names end with "Seed", using DemoSeed' in result.output
        assert "typeorm-extender seed:run --seed demo_seed" in result.output
        assert "Factory" not in result.output

    def test_with_missing_factory(self, run_cli, sqlite_project):
        result = run_cli(["seed:create", "UserSeed", "--factory", "UserFactory"])

        assert result.exit_code == 0, result.output
        assert "⚠️ Factory 'UserFactory' not found" in result.output

    def test_with_existing_factory(self, run_cli, sqlite_project):
        run_cli(["factory:create", "User"])

        result = run_cli(["seed:create", "UserSeed", "-f", "User"])

        assert result.exit_code == 0, result.output
        assert "not found" not in result.output
        content = (sqlite_project / "src/seeds/user_seed.py").read_text()
        assert "from src.factories.user_factory import UserFactory" in content


class TestSeedList:
    def test_empty(self, run_cli, sqlite_project):
        result = run_cli(["seed:list"])

        assert result.exit_code == 0, result.output
        assert "ℹ️ No seeds found" in result.output

    def test_lists_seeds(self, run_cli, sqlite_project):
        run_cli(["seed:create", "Demo"])
        run_cli(["seed:create", "Color"])

        result = run_cli(["seed:list"])

        assert result.exit_code == 0, result.output
        assert "📁 Found 2 seed(s):" in result.output
        assert "  1. color_seed" in result.output
        assert "  2. demo_seed" in result.output
        assert "  typeorm-extender seed:run --seed <seed-name>" in result.output
        assert "base_seed" not in result.output

    def test_custom_directory(self, run_cli, project_dir):
        seeds = project_dir / "db" / "seeds"
        seeds.mkdir(parents=True)
        (seeds / "extra_seed.py").write_text("")

        result = run_cli(["seed:list", "--dir", "db/seeds"])

        assert "1. extra_seed" in result.output


class TestSeedRun:
    def test_runs_all(self, run_cli, sqlite_project):
        (sqlite_project / "src/seeds/color_seed.py").write_text(COLOR_SEED)
        run_cli(["seed:create", "Demo"])

        result = run_cli(["seed:run"])

        assert result.exit_code == 0, result.output
        assert "📋 Found 2 seed(s) to run" in result.output
        assert "🌱 Executing seed: color_seed" in result.output
        assert "  ✅ demo_seed executed successfully" in result.output
        assert "✅ All seeds executed successfully!" in result.output
        assert "🔌 Database connection closed" in result.output
        assert count_colors(sqlite_project) == 1

    def test_runs_only_selected(self, run_cli, sqlite_project):
        (sqlite_project / "src/seeds/color_seed.py").write_text(COLOR_SEED)
        run_cli(["seed:create", "Demo"])

        result = run_cli(["seed:run", "--seed", "color"])

        assert result.exit_code == 0, result.output
        assert "📋 Found 1 seed(s) to run" in result.output
        assert "demo_seed" not in result.output

    def test_unknown_seed(self, run_cli, sqlite_project):
        result = run_cli(["seed:run", "-s", "ghost"])

        assert result.exit_code == 0, result.output
        assert "ℹ️ Seed 'ghost' not found" in result.output

    def test_no_seeds(self, run_cli, sqlite_project):
        result = run_cli(["seed:run"])

        assert result.exit_code == 0, result.output
        assert "ℹ️ No seeds found" in result.output

    def test_broken_seed(self, run_cli, sqlite_project):
        (sqlite_project / "src/seeds/broken_seed.py").write_text("x = 1\n")

        result = run_cli(["seed:run"])

        assert result.exit_code == 1
        assert "❌ Error running seeds:" in result.output
        assert "❌ Seed execution failed: broken_seed" in result.output
