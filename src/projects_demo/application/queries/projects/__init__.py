from projects_demo.application.queries.projects.get_project_query import (
    GetProjectQuery,
)
from projects_demo.application.queries.projects.list_projects_query import (
    ListProjectsQuery,
)
from projects_demo.application.queries.projects.stream_projects_query import (
    StreamProjectsQuery,
)

__all__ = ["GetProjectQuery", "ListProjectsQuery", "StreamProjectsQuery"]
