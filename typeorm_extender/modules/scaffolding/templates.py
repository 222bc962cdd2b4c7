"""Source templates for generated project files.

Every template is plain string interpolation. The generated modules target
SQLAlchemy 2.x and must compile on their own.
"""

from typing import Optional

from typeorm_extender.modules.scaffolding.naming import to_snake_case

SERVER_DEFAULTS = {
    "postgres": {
        "driver": "postgresql+psycopg2",
        "port": 5432,
        "username": "postgres",
    },
    "mysql": {"driver": "mysql+pymysql", "port": 3306, "username": "root"},
}


def data_source_template(database: str) -> str:
    if database == "sqlite":
        url = """URL.create(
    "sqlite",
    database=os.getenv("DB_PATH", "database.sqlite"),
)"""
    else:
        defaults = SERVER_DEFAULTS[database]
        driver, port, username = (
            defaults["driver"],
            defaults["port"],
            defaults["username"],
        )
        url = f"""URL.create(
    "{driver}",
    username=os.getenv("DB_USERNAME", "{username}"),
    password=os.getenv("DB_PASSWORD", "password"),
    host=os.getenv("DB_HOST", "localhost"),
    port=int(os.getenv("DB_PORT", "{port}")),
    database=os.getenv("DB_DATABASE", "myapp"),
)"""

    return f'''"""Database connection used by the typeorm-extender commands.

Pass it with ``--datasource src/config/data_source.py``.
"""

import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import URL

load_dotenv()

url = {url}

data_source = create_engine(url, echo=os.getenv("ENVIRONMENT") == "development")
'''


ENTITY_BASE_TEMPLATE = '''"""Declarative base shared by all entities."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
'''


USER_ENTITY_TEMPLATE = '''"""Example entity."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )
'''


BASE_FACTORY_TEMPLATE = '''"""Base class for entity factories."""

from typing import Any, Dict, Generic, List, Type, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseFactory(Generic[T]):
    """Builds entities from default attributes plus per-call overrides.

    Subclasses set ``model`` and implement ``definition()``.
    """

    model: Type[T]

    def __init__(self, session: Session):
        if session is None:
            raise ValueError("BaseFactory requires a SQLAlchemy session")
        self.session = session

    def definition(self) -> Dict[str, Any]:
        raise NotImplementedError

    def make(self, **overrides: Any) -> T:
        attributes = {**self.definition(), **overrides}
        return self.model(**attributes)

    def make_batch(self, count: int, **overrides: Any) -> List[T]:
        return [self.make(**overrides) for _ in range(count)]

    def create(self, **overrides: Any) -> T:
        entity = self.make(**overrides)
        self.session.add(entity)
        self.session.flush()
        return entity

    def create_many(self, count: int, **overrides: Any) -> List[T]:
        return [self.create(**overrides) for _ in range(count)]
'''


BASE_SEED_TEMPLATE = '''"""Base class for seeds.

``typeorm-extender seed:run`` instantiates the class named by a seed module's
``SEED`` attribute with the engine and calls ``run()`` inside a transaction.
"""

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session


class BaseSeed:
    def __init__(self, engine: Engine):
        self.engine = engine

    def run(self, session: Session) -> None:
        raise NotImplementedError
'''


def migration_template(class_name: str, timestamp: str) -> str:
    return f'''"""{class_name} migration."""

from sqlalchemy import text
from sqlalchemy.engine import Connection

NAME = "{class_name}{timestamp}"
TIMESTAMP = {int(timestamp)}


def up(connection: Connection) -> None:
    # Example: create a table
    # connection.execute(
    #     text(
    #         """
    #         CREATE TABLE example_table (
    #             id VARCHAR(36) PRIMARY KEY,
    #             name VARCHAR(255) NOT NULL,
    #             email VARCHAR(255) NOT NULL UNIQUE,
    #             is_active BOOLEAN DEFAULT TRUE,
    #             created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    #         )
    #         """
    #     )
    # )

    # Example: create an index
    # connection.execute(
    #     text("CREATE INDEX idx_example_email ON example_table (email)")
    # )

    # Example: add a column
    # connection.execute(
    #     text("ALTER TABLE example_table ADD COLUMN new_column VARCHAR(100)")
    # )
    pass


def down(connection: Connection) -> None:
    # Revert the changes made in up()
    # connection.execute(text("DROP INDEX idx_example_email"))
    # connection.execute(text("DROP TABLE example_table"))
    pass
'''


def factory_template(
    class_name: str, entity_name: str, entity_module: Optional[str]
) -> str:
    if entity_module:
        entity_import = f"from {entity_module} import {entity_name}\n"
        model_line = f"model = {entity_name}"
    else:
        entity_import = (
            f"# from src.entities.{to_snake_case(entity_name)} import {entity_name}\n"
        )
        model_line = f"# model = {entity_name}"

    return f'''"""Factory for {entity_name} entities."""

from typing import Any, Dict

{entity_import}from src.factories.base_factory import BaseFactory


class {class_name}(BaseFactory):
    {model_line}

    def definition(self) -> Dict[str, Any]:
        # Default attribute values, for example with Faker:
        # return {{
        #     "name": fake.name(),
        #     "email": fake.unique.email(),
        #     "is_active": True,
        # }}
        return {{}}

    def make_active(self, **overrides: Any):
        return self.make(**{{"is_active": True, **overrides}})

    def make_inactive(self, **overrides: Any):
        return self.make(**{{"is_active": False, **overrides}})

    def make_with_email(self, email: str, **overrides: Any):
        return self.make(**{{"email": email, **overrides}})


# Usage:
#
# with Session(engine) as session:
#     factory = {class_name}(session)
#     entity = factory.make()
#     saved = factory.create()
#     many = factory.create_many(5)
#     session.commit()
'''


def seed_template(
    class_name: str,
    factory_name: Optional[str],
    factory_module: Optional[str],
) -> str:
    if factory_name and factory_module:
        factory_import = f"from {factory_module} import {factory_name}\n"
    elif factory_name:
        factory_import = (
            f"# from src.factories.{to_snake_case(factory_name)} import {factory_name}\n"
        )
    else:
        factory_import = ""

    if factory_name:
        prefix = "" if factory_module else "# "
        body = f"""        # Build rows with the factory
        {prefix}factory = {factory_name}(session)
        {prefix}factory.create()
        {prefix}factory.create_many(10)
"""
    else:
        body = """        # Insert rows directly
        # session.add_all(
        #     [
        #         EntityName(name="Example 1", email="example1@test.com"),
        #         EntityName(name="Example 2", email="example2@test.com"),
        #     ]
        # )
"""

    return f'''"""{class_name} seed."""

from sqlalchemy.orm import Session

{factory_import}from src.seeds.base_seed import BaseSeed


class {class_name}(BaseSeed):
    def run(self, session: Session) -> None:
        if self.data_exists(session):
            return

{body}
    def data_exists(self, session: Session) -> bool:
        # return session.query(EntityName).count() > 0
        return False

    def clear_data(self, session: Session) -> None:
        # session.query(EntityName).delete()
        pass


SEED = {class_name}
'''

