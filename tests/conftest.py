from optionschema import Project, configure
import pytest


@pytest.fixture(autouse=True, scope='session')
def _configure_logfire() -> None:
    configure(Project(dev_environment=True))
