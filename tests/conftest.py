"""
Pytest configuration and fixtures for Project Launcher tests
"""

import os
import sys
import tempfile
import shutil
from pathlib import Path
import pytest

# Add parent directory to path to import modules
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)


@pytest.fixture
def temp_directory():
    """Create a temporary directory for tests"""
    temp_dir = tempfile.mkdtemp(prefix="project_launcher_test_")
    yield Path(temp_dir).resolve()
    # Cleanup
    if os.path.exists(temp_dir):
        shutil.rmtree(temp_dir)


@pytest.fixture
def projects_root(temp_directory):
    """A project root holding alpha and beta, with the launcher in tools/"""
    root = temp_directory / "workspace"
    for name in ("alpha", "beta"):
        (root / name).mkdir(parents=True)
    return root


@pytest.fixture
def launcher_file(temp_directory):
    """A launcher script whose grandparent is the workspace root"""
    tools_dir = temp_directory / "workspace" / "tools"
    tools_dir.mkdir(parents=True, exist_ok=True)
    script = tools_dir / "run_with_project.py"
    script.write_text("")
    return script


@pytest.fixture
def sample_project():
    """Create a sample Project instance"""
    from models.project import Project

    return Project(name="test-project", path=Path("/work/test-project"))


@pytest.fixture
def sample_projects():
    """Create a list of sample Project instances"""
    from models.project import Project

    return [
        Project(name=name, path=Path(f"/work/{name}"))
        for name in ("alpha", "beta", "gamma")
    ]


class ScriptedInput:
    """Feeds prepared lines to code that calls input(), then raises EOFError"""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput instances"""
    return ScriptedInput
