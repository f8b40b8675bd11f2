from .project import Project, project as default_project
from .version import VERSION
import logfire


def configure(project: Project | None = None) -> None:
    project = project or default_project

    logfire.configure(
        service_name=project.service_name + (
            '-dev' if project.dev_environment else ''),
        service_version=VERSION,
        token=project.logfire_token,
        send_to_logfire='if-token-present',
        environment='development' if project.dev_environment else 'production',
        scrubbing=False if project.dev_environment else None,
        console=False
    )
