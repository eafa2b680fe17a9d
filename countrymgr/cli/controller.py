# countrymgr/cli/controller.py
import logging
from enum import Enum, auto
from typing import Callable, Dict, Optional

from countrymgr.cli.rendering import format_percentage, render_statistics, render_table
from countrymgr.core.config import Settings
from countrymgr.core.errors import DuplicateKeyError, NotFoundError, ValidationError
from countrymgr.domain.services.statistics_service import compute_country_statistics
from countrymgr.domain.services.validation_service import (
    capitalize_words,
    parse_optional_percentage,
    require_name,
    validate_country_code,
)
from countrymgr.infra.db.repositories.country_repository import CountryRepository
from countrymgr.schemas.country_schemas import build_country

logger = logging.getLogger(__name__)

EXIT_CHOICE = 6
CLEAR_VALUE = "-"

MENU_LINES = (
    "",
    "",
    "Menu:",
    "1. View all countries",
    "2. View statistics",
    "3. Create a new country",
    "4. Edit an existing country",
    "5. Delete a country",
    "6. Exit",
)


class MenuState(Enum):
    MENU_DISPLAY = auto()
    AWAITING_CHOICE = auto()
    DISPATCH = auto()
    EXIT = auto()


class CountryController:
    """
    Bucle de menú de la consola. La lectura y la escritura se inyectan
    (por defecto input/print) para poder guiarlo desde las pruebas.
    """

    def __init__(
        self,
        repository: CountryRepository,
        config: Settings,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.repository = repository
        self.config = config
        self.read = read
        self.write = write
        self.actions: Dict[int, Callable[[], None]] = {
            1: self.list_countries,
            2: self.show_statistics,
            3: self.create_country,
            4: self.edit_country,
            5: self.delete_country,
        }

    # -----------------------------
    # Máquina de estados del menú
    # -----------------------------
    def run(self) -> None:
        state = MenuState.MENU_DISPLAY
        choice: Optional[int] = None

        while state is not MenuState.EXIT:
            if state is MenuState.MENU_DISPLAY:
                for line in MENU_LINES:
                    self.write(line)
                state = MenuState.AWAITING_CHOICE

            elif state is MenuState.AWAITING_CHOICE:
                try:
                    raw = self.read("\nEnter your choice: ")
                except EOFError:
                    state = MenuState.EXIT
                    continue
                try:
                    choice = int(raw.strip())
                except ValueError:
                    self.write("Invalid input. Please enter a number.")
                    state = MenuState.MENU_DISPLAY
                    continue
                state = MenuState.DISPATCH

            elif state is MenuState.DISPATCH:
                try:
                    state = self.dispatch(choice)
                except EOFError:
                    state = MenuState.EXIT

        logger.info("Saliendo del menú")

    def dispatch(self, choice: Optional[int]) -> MenuState:
        if choice == EXIT_CHOICE:
            return MenuState.EXIT

        action = self.actions.get(choice)
        if action is None:
            self.write("Invalid choice. Please try again.")
            return MenuState.MENU_DISPLAY

        try:
            action()
        except (NotFoundError, DuplicateKeyError, ValidationError) as e:
            logger.warning(f"Operación {choice} abortada: {e}")
            self.write(str(e))
        return MenuState.MENU_DISPLAY

    # -----------------------------
    # Acciones
    # -----------------------------
    def list_countries(self) -> None:
        for line in render_table(self.repository.find_all()):
            self.write(line)

    def show_statistics(self) -> None:
        report = compute_country_statistics(self.repository.find_all())
        for line in render_statistics(report):
            self.write(line)

    def create_country(self) -> None:
        code = self.prompt_code(must_exist=False)
        name = self.prompt_name(
            "Enter country name: ", capitalize=self.config.CAPITALIZE_NAMES
        )
        internet_users = self.prompt_percentage(
            "Enter percentage of internet users (or leave blank if unknown): "
        )
        adult_literacy_rate = self.prompt_percentage(
            "Enter percentage of adult literacy rate (or leave blank if unknown): "
        )

        country = build_country(
            code=code,
            name=name,
            internet_users=internet_users,
            adult_literacy_rate=adult_literacy_rate,
        )
        self.repository.create(country)
        self.write("Country created successfully!")

    def edit_country(self) -> None:
        code = self.prompt_code(must_exist=True)
        country = self.repository.find_by_code(code)
        if country is None:
            raise NotFoundError(code)

        self.write("Current data:")
        for line in render_table([country]):
            self.write(line)

        name = self.prompt_name(
            f"Enter new country name (Current: {country.name}, blank keeps it): ",
            current=country.name,
        )
        internet_users = self.prompt_percentage(
            "Enter new percentage of internet users "
            f"(Current: {format_percentage(country.internet_users)}, "
            f"blank keeps it, '{CLEAR_VALUE}' clears it): ",
            current=country.internet_users,
            editing=True,
        )
        adult_literacy_rate = self.prompt_percentage(
            "Enter new adult literacy rate "
            f"(Current: {format_percentage(country.adult_literacy_rate)}, "
            f"blank keeps it, '{CLEAR_VALUE}' clears it): ",
            current=country.adult_literacy_rate,
            editing=True,
        )

        updated = build_country(
            code=country.code,
            name=name,
            internet_users=internet_users,
            adult_literacy_rate=adult_literacy_rate,
        )
        self.repository.update(updated)
        self.write("Country updated successfully!")

    def delete_country(self) -> None:
        code = self.prompt_code(must_exist=True)

        # Se vuelve a leer justo antes de borrar
        country = self.repository.find_by_code(code)
        if country is None:
            self.write("Country not found.")
            return

        self.repository.delete(country)
        self.write("Country deleted.")

    # -----------------------------
    # Lecturas con reintento
    # -----------------------------
    def prompt_code(self, must_exist: bool) -> str:
        if self.config.COUNTRY_CODE_POLICY == "strict":
            prompt = "Enter country code (3 letters): "
        else:
            prompt = "Enter country code (maximum 3 characters): "

        while True:
            raw = self.read(prompt)
            try:
                return validate_country_code(
                    raw, must_exist, self.repository, self.config.COUNTRY_CODE_POLICY
                )
            except (ValidationError, NotFoundError, DuplicateKeyError) as e:
                self.write(f"{e} Please try again.")

    def prompt_name(
        self,
        prompt: str,
        current: Optional[str] = None,
        capitalize: bool = False,
    ) -> str:
        while True:
            raw = self.read(prompt)
            if current is not None and not raw.strip():
                return current
            try:
                name = require_name(raw)
            except ValidationError as e:
                self.write(f"{e} Please try again.")
                continue
            return capitalize_words(name) if capitalize else name

    def prompt_percentage(
        self,
        prompt: str,
        current: Optional[float] = None,
        editing: bool = False,
    ) -> Optional[float]:
        while True:
            raw = self.read(prompt).strip()
            if editing and not raw:
                return current
            if editing and raw == CLEAR_VALUE:
                return None
            try:
                return parse_optional_percentage(raw)
            except ValidationError as e:
                self.write(str(e))
