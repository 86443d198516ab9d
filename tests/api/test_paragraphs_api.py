"""Tests for the paragraph HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from fillpara.api.deps import get_component_factory
from fillpara.core.config import Settings
from fillpara.core.factory import ComponentFactory
from fillpara.main import create_app


PYTHON_SOURCE = "def f():\n    # alpha beta\n    # gamma\n    return 1\n"


@pytest.fixture
def settings(tmp_path):
    """Create settings that log into a temporary directory."""
    return Settings(log_dir=tmp_path / "logs")


@pytest.fixture
def client(settings):
    """Create a test client whose routes use the test settings."""
    app = create_app(settings)
    factory = ComponentFactory(settings)
    app.dependency_overrides[get_component_factory] = lambda: factory
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Health Tests
# =============================================================================


class TestHealth:
    """Test suite for the health endpoint."""

    def test_health(self, client):
        """Test that the service reports healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_log_files_created(self, client, settings):
        """Test that the app writes its log files into the configured directory."""
        assert (settings.log_dir / "info.log").exists()
        assert (settings.log_dir / "error.log").exists()


# =============================================================================
# Fill Tests
# =============================================================================


class TestFillEndpoint:
    """Test suite for POST /paragraphs/fill."""

    def test_fill_python_comment(self, client):
        """Test refilling a comment paragraph through the API."""
        response = client.post(
            "/paragraphs/fill",
            json={"text": PYTHON_SOURCE, "caret_offset": 30, "language": "python"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["found"] is True
        assert body["changed"] is True
        assert body["text"] == "def f():\n    # alpha beta gamma\n    return 1\n"
        assert body["range"] == {"start": 9, "end": 37}
        assert body["replacement"] == "    # alpha beta gamma"
        assert body["lines"] == [" alpha beta gamma"]
        assert body["comment_prefix"] == "#"

    def test_fill_uses_filename(self, client):
        """Test that the file name selects the comment prefix."""
        response = client.post(
            "/paragraphs/fill",
            json={"text": "// a\n// b\nfn main() {}", "caret_offset": 0, "filename": "main.rs"},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "// a b\nfn main() {}"

    def test_crlf_is_normalized(self, client):
        """Test that CRLF line separators are treated as newlines."""
        response = client.post(
            "/paragraphs/fill",
            json={"text": "# a\r\n# b", "caret_offset": 0, "language": "python"},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "# a b"

    def test_crlf_caret_is_mapped_to_normalized_text(self, client):
        """Test that the caret and range follow the LF-normalized text."""
        text = "x\r\n" * 6 + "# c\r\n" + "y = 1\r\n" * 3

        response = client.post(
            "/paragraphs/fill",
            json={"text": text, "caret_offset": text.index("# c"), "language": "python"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["found"] is True
        assert body["range"] == {"start": 12, "end": 15}
        assert body["text"] == "x\n" * 6 + "# c\n" + "y = 1\n" * 3

    def test_crlf_caret_at_end_of_text(self, client):
        """Test that a caret at the end of CRLF text is still inside the buffer."""
        text = "# one\r\n# two\r\n# three"

        response = client.post(
            "/paragraphs/fill",
            json={"text": text, "caret_offset": len(text), "language": "python"},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "# one two three"

    def test_caret_between_cr_and_lf(self, client):
        """Test that a caret inside a CRLF pair lands at the end of its line."""
        response = client.post(
            "/paragraphs/fill",
            json={"text": "# a\r\n# b", "caret_offset": 4, "language": "python"},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "# a b"

    def test_no_paragraph(self, client):
        """Test that a caret on code returns the text untouched."""
        response = client.post(
            "/paragraphs/fill",
            json={"text": PYTHON_SOURCE, "caret_offset": 2, "language": "python"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["found"] is False
        assert body["changed"] is False
        assert body["text"] == PYTHON_SOURCE
        assert body["range"] is None

    def test_caret_outside_text(self, client):
        """Test that a caret past the end of the text is a bad request."""
        response = client.post(
            "/paragraphs/fill",
            json={"text": "# a", "caret_offset": 1000, "language": "python"},
        )

        assert response.status_code == 400

    def test_negative_caret_is_rejected(self, client):
        """Test that request validation rejects negative offsets."""
        response = client.post(
            "/paragraphs/fill",
            json={"text": "# a", "caret_offset": -1},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"


# =============================================================================
# Locate Tests
# =============================================================================


class TestLocateEndpoint:
    """Test suite for POST /paragraphs/locate."""

    def test_locate(self, client):
        """Test locating a paragraph without editing."""
        response = client.post(
            "/paragraphs/locate",
            json={"text": PYTHON_SOURCE, "caret_offset": 12, "language": "python"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["found"] is True
        assert body["lines"] == [" alpha beta", " gamma"]
        assert body["paragraph_prefix"] == "    #"
        assert body["range"] == {"start": 9, "end": 37}

    def test_locate_plain_text(self, client):
        """Test that an explicit empty prefix locates plain text paragraphs."""
        response = client.post(
            "/paragraphs/locate",
            json={"text": "hello world\n\nnext", "caret_offset": 0, "comment_prefix": ""},
        )

        body = response.json()
        assert body["found"] is True
        assert body["lines"] == ["hello world"]
        assert body["comment_prefix"] == ""

    def test_locate_nothing(self, client):
        """Test that a blank line has no paragraph."""
        response = client.post(
            "/paragraphs/locate",
            json={"text": "a\n\nb", "caret_offset": 2},
        )

        assert response.status_code == 200
        assert response.json()["found"] is False

    def test_locate_caret_outside_text(self, client):
        """Test that an invalid caret is a bad request."""
        response = client.post(
            "/paragraphs/locate",
            json={"text": "", "caret_offset": 1},
        )

        assert response.status_code == 400


# =============================================================================
# Comment Prefix Tests
# =============================================================================


class TestCommentPrefixEndpoint:
    """Test suite for GET /paragraphs/comment-prefix."""

    def test_by_filename(self, client):
        """Test resolving a prefix from a file name."""
        response = client.get("/paragraphs/comment-prefix", params={"filename": "main.go"})

        assert response.status_code == 200
        assert response.json() == {"language": "go", "comment_prefix": "//"}

    def test_unknown_language(self, client):
        """Test that an unknown language has an empty prefix."""
        response = client.get("/paragraphs/comment-prefix", params={"language": "cobol"})

        assert response.json() == {"language": "cobol", "comment_prefix": ""}

    def test_language_beats_filename(self, client):
        """Test that the language parameter wins over the file name, as in fills."""
        response = client.get(
            "/paragraphs/comment-prefix", params={"language": "sql", "filename": "main.rs"}
        )

        assert response.json() == {"language": "sql", "comment_prefix": "--"}

    def test_default_language(self, client):
        """Test that the default language is used when nothing is given."""
        response = client.get("/paragraphs/comment-prefix")

        assert response.json() == {"language": "text", "comment_prefix": ""}
