from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_long_description_is_the_readme():
    pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert 'readme = "README.md"' in pyproject
    assert (ROOT / "README.md").read_text(encoding="utf-8").startswith("# extendb-dialect")
