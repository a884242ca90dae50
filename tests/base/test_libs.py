import os

import pytest
from faker import Faker

from httpstatus.env import Env
from httpstatus.utilities import print_and_exit
from httpstatus.utilities.logs import log, set_logger


def test_env(faker: Faker) -> None:
    assert not Env.to_bool(None)
    assert Env.to_bool(None, True)
    assert not Env.to_bool(False)
    assert Env.to_bool(True)
    assert not Env.to_bool(0)
    assert Env.to_bool(1)
    assert Env.to_bool(1 + faker.pyint())
    assert not Env.to_bool("")
    assert not Env.to_bool("false")
    assert not Env.to_bool("False")
    assert not Env.to_bool("FALSE")
    assert Env.to_bool("true")
    assert Env.to_bool("TRUE")
    assert Env.to_bool(faker.pystr())
    assert not Env.to_bool(object)
    assert Env.to_bool(object, True)

    var = f"HTTPSTATUS_{faker.pystr().upper()}"
    val = faker.pystr()
    os.environ[var] = val
    assert Env.get(var, "default") == val
    assert Env.get(f"{var}_MISSING", "default") == "default"

    os.environ[f"{var}_BOOL"] = "0"
    assert not Env.get_bool(f"{var}_BOOL", True)
    assert Env.get_bool(f"{var}_MISSING", True)


def test_logs() -> None:
    set_logger("DEBUG")
    first_id = getattr(set_logger, "log_id")
    log.debug("Logger reconfigured")

    set_logger("INFO")
    assert getattr(set_logger, "log_id") != first_id

    with pytest.raises(SystemExit) as e:
        print_and_exit("Status {} not found", "DOES_NOT_EXIST")
    assert e.value.code == 1


def test_logger_setup() -> None:
    # only the standard loguru levels are registered
    with pytest.raises(ValueError):
        log.level("VERBOSE")
    assert log.level("INFO").no == 20

    # exceptions are logged on the stderr sink
    try:
        raise ValueError("Unregistered status")
    except ValueError:
        log.exception("Failed lookup")

    from httpstatus import utilities

    assert utilities.log is log
