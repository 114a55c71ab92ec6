"""CLI demo that exercises the :class:`gitlab_labels.GitLab` label helpers.

Run with the virtual environment activated::

    python examples/demo_labels.py group/project

Set ``GITLAB_URL`` / ``GITLAB_TOKEN`` for your instance; the defaults point at
``https://gitlab.com/api/v4/`` without a token.
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from gitlab_labels import (
    CreateLabelOptions,
    DeleteLabelOptions,
    GitLab,
    GitLabError,
    UpdateLabelOptions,
)

logging.basicConfig(level=logging.INFO)


def main() -> None:
    project = sys.argv[1] if len(sys.argv) > 1 else "gitlab-org/gitlab"

    with GitLab() as gitlab:
        labels = list(gitlab.labels.list_all(project))
        print(f"{project} has {len(labels)} labels")
        for label in labels[:10]:
            print(f"  {label.color}  {label.name}")

        if not gitlab.config.token:
            print("\nSet GITLAB_TOKEN to try create/update/delete.")
            return

        try:
            created = gitlab.labels.create(project, CreateLabelOptions(name="demo-label", color=(66, 139, 202)))
            print(f"\nCreated {created}")
            updated = gitlab.labels.update(project, UpdateLabelOptions(name="demo-label", color="#d9534f"))
            print(f"Updated {updated}")
            response = gitlab.labels.delete(project, DeleteLabelOptions(name="demo-label"))
            print(f"Deleted (HTTP {response.status_code})")
        except GitLabError as exc:
            print(f"Request failed: {exc}")


if __name__ == "__main__":
    main()
