"""Project label resource wrapper.

GitLab API docs: https://docs.gitlab.com/ee/api/labels.html
"""

from __future__ import annotations

from typing import Iterator, Optional

from .base import Resource
from .labels_types import (
    CreateLabelOptions,
    DeleteLabelOptions,
    Label,
    ListLabelsOptions,
    UpdateLabelOptions,
    decode_label,
    decode_labels,
)
from ._common_types import ProjectInput, project_path
from ..response import Response


class Labels(Resource):
    """Label operations on a project.

    ``project`` is a numeric ID, a ``namespace/name`` path, or a
    :class:`NumericID` / :class:`PathName`. An invalid identifier raises
    ``ValidationError`` before any request is sent; everything else is
    left to the server and surfaces as ``HTTPStatusError``.
    """

    def list(
        self,
        project: ProjectInput,
        options: Optional[ListLabelsOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> list[Label]:
        """Fetch one page of the project's labels.

        Parameters
        ----------
        project
            Project identifier.
        options
            Pagination and filter parameters.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[Label]
            Labels in the order the server returned them.
        """
        response = self.list_page(project, options, timeout=timeout)
        return response.data or []

    def list_page(
        self,
        project: ProjectInput,
        options: Optional[ListLabelsOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Response[list[Label]]:
        """Fetch one page of labels along with its pagination headers."""
        path = project_path(project, "labels")
        return self._get(path, options, decoder=decode_labels, timeout=timeout)

    def list_all(
        self,
        project: ProjectInput,
        options: Optional[ListLabelsOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Iterator[Label]:
        """Iterate over every label, requesting pages as they are consumed.

        Follows ``X-Next-Page`` until the server stops sending one or points
        back at a page already fetched. Starts at ``options.page`` when given.
        """
        options = options or ListLabelsOptions()
        visited = {options.page or 1}
        while True:
            response = self.list_page(project, options, timeout=timeout)
            yield from response.data or []
            next_page = response.next_page
            if next_page is None or next_page in visited:
                return
            visited.add(next_page)
            options = ListLabelsOptions(
                page=next_page,
                per_page=options.per_page,
                with_counts=options.with_counts,
                search=options.search,
            )

    def create(
        self,
        project: ProjectInput,
        options: CreateLabelOptions,
        *,
        timeout: Optional[float] = None,
    ) -> Label:
        """Create a label with the given name and color.

        The server rejects a duplicate name or a malformed color.
        """
        path = project_path(project, "labels")
        response = self._post(path, options, decoder=decode_label, timeout=timeout)
        return response.data  # type: ignore[return-value]

    def update(
        self,
        project: ProjectInput,
        options: UpdateLabelOptions,
        *,
        timeout: Optional[float] = None,
    ) -> Label:
        """Update the label named ``options.name``.

        Fields left as ``None`` are not sent and keep their current value.
        At least one change is needed; that rule is enforced by the server.
        """
        path = project_path(project, "labels")
        response = self._put(path, options, decoder=decode_label, timeout=timeout)
        return response.data  # type: ignore[return-value]

    def delete(
        self,
        project: ProjectInput,
        options: DeleteLabelOptions,
        *,
        timeout: Optional[float] = None,
    ) -> Response[None]:
        """Delete the label named ``options.name``.

        Returns the response envelope; any non-2xx status the server sends is
        raised unchanged as ``HTTPStatusError``.
        """
        path = project_path(project, "labels")
        return self._delete(path, options, timeout=timeout)
