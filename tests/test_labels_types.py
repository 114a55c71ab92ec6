import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from gitlab_labels.errors import ValidationError  # noqa: E402
from gitlab_labels.resources.labels_types import (  # noqa: E402
    CreateLabelOptions,
    DeleteLabelOptions,
    Label,
    ListLabelsOptions,
    UpdateLabelOptions,
    decode_labels,
)


class LabelTests(unittest.TestCase):
    def test_from_payload_minimal(self):
        label = Label.from_payload({"name": "bug", "color": "#ff0000"})
        self.assertEqual(label, Label(name="bug", color="#ff0000"))
        self.assertIsNone(label.id)

    def test_from_payload_full(self):
        payload = {
            "id": 3,
            "name": "bug",
            "color": "#d9534f",
            "text_color": "#FFFFFF",
            "description": "Broken things",
            "open_issues_count": 4,
            "closed_issues_count": 1,
            "open_merge_requests_count": 0,
            "subscribed": False,
            "priority": 10,
            "is_project_label": True,
        }
        label = Label.from_payload(payload)
        self.assertEqual(label.id, 3)
        self.assertEqual(label.description, "Broken things")
        self.assertEqual(label.open_issues_count, 4)
        self.assertFalse(label.subscribed)
        self.assertEqual(label.priority, 10)

    def test_from_payload_missing_fields(self):
        with self.assertRaises(KeyError):
            Label.from_payload({"name": "bug"})

    def test_from_payload_not_object(self):
        with self.assertRaises(TypeError):
            Label.from_payload(["bug"])

    def test_decode_labels_requires_list(self):
        with self.assertRaises(TypeError):
            decode_labels({"name": "bug", "color": "#fff"})

    def test_str(self):
        self.assertEqual(str(Label(name="bug", color="#fff")), "Label(name='bug', color='#fff')")


class OptionsTests(unittest.TestCase):
    def test_absent_fields_are_not_sent(self):
        self.assertEqual(UpdateLabelOptions(name="bug").to_params(), {"name": "bug"})
        self.assertEqual(CreateLabelOptions().to_params(), {})
        self.assertEqual(DeleteLabelOptions(name="bug").to_params(), {"name": "bug"})

    def test_empty_string_is_sent(self):
        self.assertEqual(UpdateLabelOptions(name="bug", description="").to_params(), {"name": "bug", "description": ""})

    def test_update_wire_names(self):
        options = UpdateLabelOptions(name="bug", new_name="defect", color="#000000", priority=0)
        self.assertEqual(
            options.to_params(),
            {"name": "bug", "new_name": "defect", "color": "#000000", "priority": 0},
        )

    def test_create_color_conversion(self):
        self.assertEqual(CreateLabelOptions(name="bug", color=0x00FF00).to_params()["color"], "#00ff00")

    def test_update_bad_color_input(self):
        with self.assertRaises(ValidationError):
            UpdateLabelOptions(name="bug", color=object()).to_params()

    def test_list_options(self):
        self.assertEqual(
            ListLabelsOptions(page=1, with_counts=False).to_params(),
            {"page": 1, "with_counts": False},
        )
