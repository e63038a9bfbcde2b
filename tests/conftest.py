import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from plantemplates.registry import Template, TemplateRegistry

RECORDING_BYTES = b'<?xml version="1.0"?>\n<jmeterTestPlan>recording</jmeterTestPlan>\n'
FRAGMENT_BYTES = b'<?xml version="1.0"?>\n<jmeterTestPlan>assertions</jmeterTestPlan>\n'


class RecordingHost:
    """Host double recording the calls made on it, in order."""

    def __init__(self, dirty=False):
        self.dirty = dirty
        self.calls = []

    def is_dirty(self):
        return self.dirty

    def save(self):
        self.calls.append(("save",))
        self.dirty = False

    def stop_execution(self):
        self.calls.append(("stop_execution",))

    def load_project_file(self, path, is_full_replace):
        self.calls.append(("load_project_file", path, is_full_replace))


@pytest.fixture(autouse=True)
def isolated_preferences(tmp_path, monkeypatch):
    """Keep preferences and the home override away from the real user."""
    support_dir = tmp_path / "support"
    monkeypatch.setenv("PLANTEMPLATES_SUPPORT_DIR", str(support_dir))
    monkeypatch.delenv("PLANTEMPLATES_HOME", raising=False)
    return support_dir


@pytest.fixture
def home_dir(tmp_path):
    """An installation home with two templates and an index."""
    home = tmp_path / "home"
    templates = home / "templates"
    templates.mkdir(parents=True)
    (templates / "recording.jmx").write_bytes(RECORDING_BYTES)
    (templates / "assertions.jmx").write_bytes(FRAGMENT_BYTES)
    (templates / "templates.yaml").write_text(
        "templates:\n"
        "  - name: Recording\n"
        "    file: templates/recording.jmx\n"
        "    test_plan: true\n"
        "    description: <h1>Recording</h1>\n"
        "  - name: Assertions\n"
        "    file: templates/assertions.jmx\n"
        "    test_plan: false\n"
        "    description: <p>Assertion fragment</p>\n",
        encoding="utf-8",
    )
    return home


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def registry():
    return TemplateRegistry([
        Template("Recording", "<h1>Recording</h1>", "templates/recording.jmx", True),
        Template("Assertions", "<p>Assertion fragment</p>", "templates/assertions.jmx", False),
    ])


@pytest.fixture
def host():
    return RecordingHost()
