"""
Structural tests for the User/Post schema: ORM metadata, the models source,
and the initial Alembic revision.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from sqlalchemy import Boolean, Integer, String, create_engine, inspect
from sqlalchemy.orm import RelationshipDirection

from alembic import command
from alembic.config import Config
from src.db import models
from src.db.models import Base, Post, User

PROJECT_ROOT = Path(__file__).resolve().parents[3]
MODELS_SOURCE = Path(models.__file__).read_text(encoding="utf-8")
MIGRATIONS_DIR = PROJECT_ROOT / "alembic" / "versions"


class TestTables:
    """Table-level structure."""

    def test_exactly_two_tables(self) -> None:
        assert set(Base.metadata.tables) == {"User", "Post"}

    @pytest.mark.parametrize("table_name", ["User", "Post"])
    def test_single_autoincrement_integer_primary_key(self, table_name: str) -> None:
        table = Base.metadata.tables[table_name]
        primary_key = list(table.primary_key.columns)

        assert [column.name for column in primary_key] == ["id"]
        assert isinstance(primary_key[0].type, Integer)
        assert primary_key[0].autoincrement is True


class TestUserModel:
    """Columns and relationships of User."""

    def test_email_required_and_unique(self) -> None:
        email = User.__table__.c.email
        assert isinstance(email.type, String)
        assert email.nullable is False
        assert email.unique is True

    def test_name_optional(self) -> None:
        assert User.__table__.c.name.nullable is True

    def test_posts_is_one_to_many(self) -> None:
        relationship = inspect(User).relationships["posts"]
        assert relationship.direction is RelationshipDirection.ONETOMANY
        assert relationship.mapper.class_ is Post
        assert relationship.back_populates == "author"

    def test_column_names(self) -> None:
        assert [column.name for column in User.__table__.columns] == ["id", "email", "name"]


class TestPostModel:
    """Columns and relationships of Post."""

    def test_title_required_content_optional(self) -> None:
        table = Post.__table__
        assert table.c.title.nullable is False
        assert table.c.content.nullable is True

    def test_published_defaults_to_false(self) -> None:
        published = Post.__table__.c.published
        assert isinstance(published.type, Boolean)
        assert published.nullable is False
        assert published.default is not None
        assert published.default.arg is False
        assert published.server_default is not None

    def test_author_id_references_user_id(self) -> None:
        author_id = Post.__table__.c.authorId
        foreign_keys = list(author_id.foreign_keys)

        assert author_id.nullable is False
        assert len(foreign_keys) == 1
        assert foreign_keys[0].column.table.name == "User"
        assert foreign_keys[0].column.name == "id"

    def test_author_is_many_to_one(self) -> None:
        relationship = inspect(Post).relationships["author"]
        assert relationship.direction is RelationshipDirection.MANYTOONE
        assert relationship.mapper.class_ is User
        assert [column.name for column in relationship.local_columns] == ["authorId"]

    def test_only_post_has_foreign_keys(self) -> None:
        assert not User.__table__.foreign_keys
        assert len(Post.__table__.foreign_keys) == 1


class TestModelsSource:
    """Textual checks on the declarative models module."""

    def test_declares_two_model_classes(self) -> None:
        assert re.findall(r"^class (\w+)\(Base\):", MODELS_SOURCE, re.MULTILINE) == [
            "User",
            "Post",
        ]

    def test_one_primary_key_marker_per_model(self) -> None:
        assert MODELS_SOURCE.count("primary_key=True") == 2

    def test_foreign_key_spelling(self) -> None:
        assert re.search(r'"authorId",\s+Integer,\s+ForeignKey\("User\.id"\)', MODELS_SOURCE)

    def test_no_unfinished_markers(self) -> None:
        lowered = MODELS_SOURCE.lower()
        assert "todo" not in lowered
        assert "fixme" not in lowered


class TestMigrations:
    """The Alembic revision produces the same schema as the models."""

    def test_ini_has_no_hardcoded_credentials(self) -> None:
        ini_text = (PROJECT_ROOT / "alembic.ini").read_text(encoding="utf-8")
        assert not re.search(r"postgresql(\+\w+)?://[^\s:]+:[^\s@]+@", ini_text)

    def test_upgrade_creates_user_and_post(self, tmp_path: Path) -> None:
        database = tmp_path / "schema.db"
        config = Config(str(PROJECT_ROOT / "alembic.ini"))
        config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
        config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{database}")

        command.upgrade(config, "head")

        engine = create_engine(f"sqlite:///{database}")
        try:
            inspector = inspect(engine)
            assert {"User", "Post"} <= set(inspector.get_table_names())

            user_columns = {column["name"]: column for column in inspector.get_columns("User")}
            assert set(user_columns) == {"id", "email", "name"}
            assert user_columns["name"]["nullable"] is True

            post_columns = {column["name"] for column in inspector.get_columns("Post")}
            assert post_columns == {"id", "title", "content", "published", "authorId"}

            (foreign_key,) = inspector.get_foreign_keys("Post")
            assert foreign_key["constrained_columns"] == ["authorId"]
            assert foreign_key["referred_table"] == "User"
            assert foreign_key["referred_columns"] == ["id"]

            unique_columns = [
                constraint["column_names"] for constraint in inspector.get_unique_constraints("User")
            ]
            assert ["email"] in unique_columns
        finally:
            engine.dispose()
