import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from countrymgr.cli.controller import CountryController
from countrymgr.core.config import Settings
from countrymgr.infra.db.models.country import new_country
from countrymgr.infra.db.repositories.country_repository import CountryRepository
from countrymgr.infra.db.session import StoreClient


class ScriptedConsole:
    """Entrada fija línea por línea; EOFError cuando se acaba el guion."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def store():
    """SQLite en memoria compartida entre sesiones."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    client = StoreClient(engine)
    client.init_db()
    yield client
    client.dispose()


@pytest.fixture
def repository(store) -> CountryRepository:
    return CountryRepository(store)


@pytest.fixture
def seeded_repository(repository) -> CountryRepository:
    repository.create(new_country("USA", "United States", 46.2, 78.89))
    repository.create(new_country("FRA", "France", 84.7, None))
    repository.create(new_country("ATA", "Antarctica"))
    return repository


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def run_console(repository, settings):
    """Ejecuta el menú completo con las líneas dadas y devuelve la consola usada."""

    def _run(lines, config: Settings | None = None) -> ScriptedConsole:
        console = ScriptedConsole(lines)
        controller = CountryController(
            repository,
            config or settings,
            read=console.read,
            write=console.write,
        )
        controller.run()
        return console

    return _run
