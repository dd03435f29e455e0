import pytest

from brick.lib.ids import SequentialIds
from brick.lib.models import ingr, stage, step
from brick.lib.units import Unit, amount


@pytest.fixture
def new_id():
    return SequentialIds()


@pytest.fixture
def butter(new_id):
    return ingr("butter", amount(227, Unit.G), new_id=new_id)


@pytest.fixture
def flour(new_id):
    return ingr("flour", amount(250, Unit.G), new_id=new_id)


@pytest.fixture
def make_stage(new_id):
    def _make(parent, *texts, title=None, expressions=()):
        steps = [step(text, list(expressions), new_id=new_id) for text in texts]
        return stage(parent, steps, title=title, new_id=new_id)

    return _make
