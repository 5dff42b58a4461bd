import pytest

from svelte_docs_server.config import Settings
from svelte_docs_server.engine.core import build_index
from svelte_docs_server.services import DocumentationStore

SAMPLE_DOC = """# Start of Svelte documentation
Svelte is a UI framework.

# Routing
Use a router.
   Routes live in src/routes.
# Reactive state
Use $state to declare reactive state.
State updates are reactive.
# Empty
# Stores
A store holds state outside components.
"""


@pytest.fixture
def settings() -> Settings:
    return Settings(
        docs_url="https://docs.example.test/llms-small.txt",
        fetch_retry_delay_seconds=0,
        refresh_interval_seconds=0,
    )


@pytest.fixture
def index():
    return build_index(SAMPLE_DOC)


@pytest.fixture
def store(settings) -> DocumentationStore:
    store = DocumentationStore(settings)
    store.load_text(SAMPLE_DOC)
    return store
