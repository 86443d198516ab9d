"""Streamlit frontend for the Fill Paragraph service.

A minimal editor host: paste source text, pick the caret line and the
language, and see the paragraph at the caret reflowed by the API.
"""

import logging
import os
from typing import Any

import httpx
import streamlit as st

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

LANGUAGES = ["python", "kotlin", "java", "javascript", "rust", "go", "sql", "lua", "text"]

SAMPLE_TEXT = """def reflow():
    # This comment was wrapped at a narrow width by someone
    # who liked short lines, and now it should be
    # refilled to the standard column.
    pass
"""

# Page config
st.set_page_config(
    page_title="Fill Paragraph",
    page_icon="📝",
    layout="wide",
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# API Client
# =============================================================================


class APIClient:
    """Simple API client for the Streamlit frontend."""

    def __init__(self, base_url: str):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API.
        """
        self.base_url = base_url.rstrip("/")

    def fill(self, text: str, caret_offset: int, language: str) -> dict[str, Any]:
        """Refill the paragraph at the caret.

        Args:
            text: Full document text.
            caret_offset: Character offset of the caret.
            language: Language identifier.

        Returns:
            API response dict, empty on failure.
        """
        url = f"{self.base_url}/paragraphs/fill"
        payload = {"text": text, "caret_offset": caret_offset, "language": language}

        try:
            response = httpx.post(url, json=payload, timeout=10.0)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Fill failed: {e.response.status_code} - {e.response.text}")
            st.error(f"Fill failed: {e.response.status_code}")
            return {}
        except httpx.HTTPError as e:
            logger.error(f"Fill error: {e}")
            st.error(f"Fill error: {e}")
            return {}

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            response = httpx.get(f"{self.base_url}/health", timeout=5.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False


def line_offset(text: str, line: int) -> int:
    """Return the offset of the start of a 1-based line, clamped to the text."""
    lines = text.split("\n")
    line = max(1, min(line, len(lines)))
    return sum(len(previous) + 1 for previous in lines[: line - 1])


# =============================================================================
# UI Components
# =============================================================================


def render_sidebar(client: APIClient) -> None:
    """Render the sidebar with connection status.

    Args:
        client: The API client instance.
    """
    with st.sidebar:
        st.title("📝 Fill Paragraph")

        st.divider()

        if client.health_check():
            st.success("✅ API Connected")
        else:
            st.error("❌ API Disconnected")
            st.info(f"API URL: {API_BASE_URL}")

        st.divider()

        st.subheader("Instructions")
        st.markdown("""
        1. **Paste** source text into the editor
        2. **Pick** the caret line and the language
        3. **Fill** to reflow the comment paragraph at that line

        Paragraphs end at blank comment lines and at code.
        """)


def render_editor(client: APIClient) -> None:
    """Render the editor and the fill result.

    Args:
        client: The API client instance.
    """
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Source")
        text = st.text_area("Source", value=SAMPLE_TEXT, height=320, label_visibility="collapsed")
        line = st.number_input("Caret line", min_value=1, value=2, step=1)
        language = st.selectbox("Language", LANGUAGES)
        fill_button = st.button("Fill", type="primary", use_container_width=True)

    with col2:
        st.subheader("Result")
        if not fill_button:
            st.info("Press Fill to reflow the paragraph at the caret line.")
            return

        result = client.fill(text, line_offset(text, int(line)), language)
        if not result:
            return

        if not result.get("found"):
            st.warning("No paragraph at the caret line.")
            return

        st.code(result["text"], language=None if language == "text" else language)
        st.caption(
            f"Replaced [{result['range']['start']}, {result['range']['end']}) "
            f"with {len(result['lines'])} lines"
        )


# =============================================================================
# Main App
# =============================================================================


def main() -> None:
    """Main application entry point."""
    client = APIClient(API_BASE_URL)

    render_sidebar(client)

    st.title("Comment Paragraph Reflow")
    render_editor(client)


if __name__ == "__main__":
    main()
