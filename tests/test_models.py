from datetime import datetime

import pytest
from sqlalchemy import create_engine, inspect, select
from sqlalchemy.orm import Session

from skeleton.models import Base, Example


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


def test_table_is_named_examples(engine):
    assert inspect(engine).get_table_names() == ["examples"]


def test_touch_sets_both_timestamps():
    example = Example(name="a", price=1.0)
    example.touch()
    assert example.created_at == example.updated_at
    assert isinstance(example.created_at, datetime)


def test_touch_keeps_existing_created_at():
    past = datetime(2020, 1, 1)
    example = Example(name="a", price=1.0, created_at=past)
    example.touch()
    assert example.created_at == past
    assert example.updated_at > past


def test_insert_stamps_timestamps(engine):
    with Session(engine) as session:
        example = Example(name="Contoh", price=2500)
        session.add(example)
        session.commit()
        assert example.id == 1
        assert example.created_at is not None
        assert example.created_at == example.updated_at


def test_update_keeps_created_at(engine):
    with Session(engine) as session:
        example = Example(name="Contoh", price=2500)
        session.add(example)
        session.commit()
        created = example.created_at
        updated = example.updated_at
        example.price = 3000
        session.commit()
        assert example.created_at == created
        assert example.updated_at >= updated


def test_insert_with_preset_created_at(engine):
    past = datetime(2020, 1, 1)
    with Session(engine) as session:
        session.add(Example(name="old", price=1.0, created_at=past))
        session.commit()
        stored = session.scalars(select(Example)).one()
        assert stored.created_at == past
        assert stored.updated_at > past
        assert stored.name == "old"