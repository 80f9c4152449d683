import pytest

from app.features.project_structure.domain.models import ScannerConfig
from app.features.project_structure.service.scanner import StructureScanner

from structure_fakes import DictResolver, FakeClock, InMemoryStructureRepo, RecordingFileSystem


@pytest.fixture
def project_tree(tmp_path):
    """
    /work/app
      src/a.ts
      src/b.ts
      node_modules/x
      .git/HEAD
    """
    root = tmp_path / "work" / "app"
    (root / "src").mkdir(parents=True)
    (root / "src" / "a.ts").write_text("export const a = 1;\n")
    (root / "src" / "b.ts").write_text("export const b = 2;\n")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "x").write_text("dep")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return root


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repo():
    return InMemoryStructureRepo()


@pytest.fixture
def fs():
    return RecordingFileSystem()


@pytest.fixture
def resolver(project_tree):
    return DictResolver({"proj_app": project_tree})


@pytest.fixture
def scanner(resolver, fs, repo, clock):
    return StructureScanner(
        resolver=resolver,
        fs=fs,
        repo=repo,
        config=ScannerConfig(),
        clock=clock
    )
