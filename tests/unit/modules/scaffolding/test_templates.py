"""Generated sources must be valid Python."""

import pytest

from typeorm_extender.modules.scaffolding import templates


@pytest.mark.parametrize("database", ["postgres", "mysql", "sqlite"])
def test_data_source_template_compiles(database):
    source = templates.data_source_template(database)
    compile(source, "data_source.py", "exec")
    assert "data_source = create_engine(" in source


def test_data_source_template_server_defaults():
    postgres = templates.data_source_template("postgres")
    mysql = templates.data_source_template("mysql")

    assert '"postgresql+psycopg2"' in postgres
    assert 'os.getenv("DB_PORT", "5432")' in postgres
    assert '"mysql+pymysql"' in mysql
    assert 'os.getenv("DB_USERNAME", "root")' in mysql


def test_data_source_template_sqlite_uses_db_path():
    source = templates.data_source_template("sqlite")
    assert 'os.getenv("DB_PATH", "database.sqlite")' in source
    assert "DB_HOST" not in source


@pytest.mark.parametrize(
    "name",
    [
        "ENTITY_BASE_TEMPLATE",
        "USER_ENTITY_TEMPLATE",
        "BASE_FACTORY_TEMPLATE",
        "BASE_SEED_TEMPLATE",
    ],
)
def test_static_templates_compile(name):
    compile(getattr(templates, name), f"{name}.py", "exec")


def test_migration_template():
    source = templates.migration_template("CreateUsersTable", "20250619173821")
    compile(source, "migration.py", "exec")

    assert 'NAME = "CreateUsersTable20250619173821"' in source
    assert "TIMESTAMP = 20250619173821" in source
    assert "def up(connection: Connection) -> None:" in source
    assert "def down(connection: Connection) -> None:" in source


def test_factory_template_with_entity_module():
    source = templates.factory_template("UserFactory", "User", "src.entities.user")
    compile(source, "factory.py", "exec")

    assert "from src.entities.user import User\n" in source
    assert "    model = User\n" in source
    assert "class UserFactory(BaseFactory):" in source


def test_factory_template_without_entity_module():
    source = templates.factory_template("OrderFactory", "Order", None)
    compile(source, "factory.py", "exec")

    assert "# from src.entities.order import Order\n" in source
    assert "    # model = Order\n" in source


def test_seed_template_with_factory():
    source = templates.seed_template(
        "UserSeed", "UserFactory", "src.factories.user_factory"
    )
    compile(source, "seed.py", "exec")

    assert "from src.factories.user_factory import UserFactory\n" in source
    assert "        factory = UserFactory(session)\n" in source
    assert source.rstrip().endswith("SEED = UserSeed")


def test_seed_template_with_missing_factory():
    source = templates.seed_template("UserSeed", "UserFactory", None)
    compile(source, "seed.py", "exec")

    assert "# from src.factories.user_factory import UserFactory\n" in source
    assert "        # factory = UserFactory(session)\n" in source


def test_seed_template_without_factory():
    source = templates.seed_template("DemoSeed", None, None)
    compile(source, "seed.py", "exec")

    assert "Factory" not in source
