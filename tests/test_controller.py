from countrymgr.cli.controller import CountryController, MenuState
from countrymgr.core.config import Settings
from countrymgr.infra.db.models.country import new_country


def rows_for(console, code):
    return [line for line in console.output if line.startswith(f"{code} ")]


def test_usa_scenario_create_edit_delete(run_console, repository):
    console = run_console([
        "3", "usa", "united states", "46.2", "78.89",
        "1",
        "4", "USA", "United States of America", "", "",
        "1",
        "5", "USA",
        "1",
        "6",
    ])

    assert "Country created successfully!" in console.output
    assert "Country updated successfully!" in console.output
    assert "Country deleted." in console.output

    usa_rows = rows_for(console, "USA")
    # listado tras crear, tabla "Current data" de la edición, listado tras editar
    assert usa_rows[0].split() == ["USA", "United", "States", "46.20", "78.89"]
    assert usa_rows[-1].split() == ["USA", "United", "States", "of", "America", "46.20", "78.89"]
    assert len(usa_rows) == 3
    after_delete = console.output[console.output.index("Country deleted."):]
    assert "No countries found." in after_delete
    assert repository.find_by_code("USA") is None


def test_non_numeric_choice_redisplays_menu(run_console):
    console = run_console(["abc", "6"])

    assert "Invalid input. Please enter a number." in console.output
    assert console.output.count("Menu:") == 2


def test_out_of_range_choice(run_console):
    console = run_console(["9", "0", "6"])

    assert console.output.count("Invalid choice. Please try again.") == 2


def test_end_of_input_exits(run_console):
    console = run_console([])

    assert console.output.count("Menu:") == 1


def test_end_of_input_inside_a_prompt_exits(run_console, repository):
    console = run_console(["3", "CAN", "Canada"])

    assert "Country created successfully!" not in console.output
    assert repository.find_by_code("CAN") is None


def test_create_reprompts_invalid_code_and_percentage(run_console, repository):
    console = run_console(["3", "us", "usa1", "can", "canada", "abc", "", "99", "6"])

    assert "Country code must be exactly 3 letters (A-Z). Please try again." in console.output
    assert "Country code cannot exceed 3 characters. Please try again." in console.output
    assert any(line.startswith("Invalid input.") for line in console.output)

    canada = repository.find_by_code("CAN")
    assert canada.name == "Canada"
    assert canada.internet_users is None
    assert canada.adult_literacy_rate == 99.0


def test_create_with_existing_code_reprompts(run_console, seeded_repository):
    console = run_console(["3", "usa", "mex", "mexico", "", "", "6"])

    assert "Country with code USA already exists. Please try again." in console.output
    assert seeded_repository.find_by_code("MEX").name == "Mexico"
    assert seeded_repository.find_by_code("USA").name == "United States"


def test_create_keeps_name_casing_when_capitalization_disabled(run_console, repository):
    config = Settings(_env_file=None, CAPITALIZE_NAMES=False)

    run_console(["3", "ddr", "east GERMANY", "", "", "6"], config=config)

    assert repository.find_by_code("DDR").name == "east GERMANY"


def test_length_policy_accepts_short_codes(run_console, repository):
    config = Settings(_env_file=None, COUNTRY_CODE_POLICY="length")

    run_console(["3", "u1", "Test Land", "", "", "6"], config=config)

    assert repository.find_by_code("U1").name == "Test Land"


def test_edit_reprompts_until_code_exists(run_console, seeded_repository):
    console = run_console(["4", "xyz", "fra", "", "-", "99.5", "6"])

    assert "Country with code XYZ not found. Please try again." in console.output
    france = seeded_repository.find_by_code("FRA")
    assert france.name == "France"
    assert france.internet_users is None
    assert france.adult_literacy_rate == 99.5


def test_edit_shows_current_values_in_prompts(run_console, seeded_repository):
    console = run_console(["4", "USA", "", "", "", "6"])

    assert "Current data:" in console.output
    assert any("Current: United States" in p for p in console.prompts)
    assert any("Current: 46.20" in p for p in console.prompts)
    assert seeded_repository.find_by_code("USA").internet_users == 46.2


def test_delete_missing_code_reprompts(run_console, seeded_repository):
    console = run_console(["5", "xyz", "ata", "6"])

    assert "Country with code XYZ not found. Please try again." in console.output
    assert "Country deleted." in console.output
    assert seeded_repository.find_by_code("ATA") is None


def test_statistics_output(run_console, seeded_repository):
    console = run_console(["2", "6"])

    assert "Internet Users (%):" in console.output
    assert " Maximum: France - 84.70%" in console.output
    assert " Minimum: United States - 46.20%" in console.output
    assert " Average: 65.45%" in console.output
    assert " Maximum: United States - 78.89%" in console.output


def test_statistics_without_data(run_console):
    console = run_console(["2", "6"])

    assert console.output.count(" No data available.") == 2
    assert console.output.count(" Average: --") == 2


def test_delete_reports_record_that_vanished(seeded_repository, settings, monkeypatch):
    output = []
    controller = CountryController(
        seeded_repository, settings, read=lambda _: "USA", write=output.append
    )
    monkeypatch.setattr(seeded_repository, "exists", lambda code: True)
    monkeypatch.setattr(seeded_repository, "find_by_code", lambda code: None)

    assert controller.dispatch(5) is MenuState.MENU_DISPLAY
    assert output == ["Country not found."]


def test_dispatch_exit_and_unknown_choice(repository, settings):
    output = []
    controller = CountryController(repository, settings, read=lambda _: "", write=output.append)

    assert controller.dispatch(6) is MenuState.EXIT
    assert controller.dispatch(42) is MenuState.MENU_DISPLAY
    assert output == ["Invalid choice. Please try again."]


def test_duplicate_on_save_is_reported(repository, settings):
    lines = iter(["CAN", "Canada", "", ""])
    output = []
    controller = CountryController(
        repository, settings, read=lambda _: next(lines), write=output.append
    )

    original_create = repository.create

    def create_after_race(country):
        original_create(new_country(country.code, "Somebody Else"))
        return original_create(country)

    repository.create = create_after_race

    assert controller.dispatch(3) is MenuState.MENU_DISPLAY
    assert output[-1] == "Country with code CAN already exists."
    assert repository.find_by_code("CAN").name == "Somebody Else"


def test_create_reprompts_name_that_is_too_long(run_console, repository):
    console = run_console(["3", "abc", "A" * 121, "short name", "", "", "6"])

    assert "Country name cannot exceed 120 characters. Please try again." in console.output
    assert "Country created successfully!" in console.output
    assert repository.find_by_code("ABC").name == "Short Name"


def test_edit_reprompts_name_that_is_too_long(run_console, seeded_repository):
    console = run_console(["4", "USA", "B" * 121, "United States of America", "", "", "6"])

    assert "Country name cannot exceed 120 characters. Please try again." in console.output
    assert "Country updated successfully!" in console.output
    assert seeded_repository.find_by_code("USA").name == "United States of America"
