import pytest
from faker import Faker


# Beware, this replaces the standard faker fixture provided by Faker it-self
@pytest.fixture
def faker() -> Faker:
    return Faker()
