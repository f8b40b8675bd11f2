from pydantic import BaseModel
from tomllib import loads
from pathlib import Path
from os import environ


class Project(BaseModel):
    logfire_token: str | None = None
    dev_environment: bool = True
    service_name: str = 'optionschema'


def load_project(path: Path | str = 'project.toml') -> Project:
    path = Path(path)

    if not path.exists():
        return Project()

    return Project.model_validate(loads(path.read_text()))


project = load_project(environ.get('OPTIONSCHEMA_PROJECT', 'project.toml'))
