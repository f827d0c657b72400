"""Tests for project entry extraction."""

from resume_sections.core.parser_config import ProjectsConfig
from resume_sections.core.projects_parser import parse_projects, split_timeframe


def test_block_with_timeframe_and_tech_stack():
    text = (
        "E-Commerce Platform (Jan 2023 - Mar 2023)\n"
        "Full-stack store with Stripe payments\n"
        "Tech Stack: React, Node.js, PostgreSQL"
    )

    result = parse_projects(text)

    assert list(result) == ["e_commerce_platform"]
    project = result["e_commerce_platform"]
    assert project.title == "E-Commerce Platform"
    assert project.timeframe == "Jan 2023 - Mar 2023"
    assert project.technologies == "React, Node.js, PostgreSQL"
    assert project.description == "Full-stack store with Stripe payments"


def test_tech_cue_without_colon():
    text = "Chess Engine\nBuilt with Rust and WebAssembly\nPlays at 2000 Elo"

    project = parse_projects(text)["chess_engine"]

    assert project.technologies == "Rust and WebAssembly"
    assert project.description == "Plays at 2000 Elo"


def test_multiple_blocks_keyed_by_title():
    text = "Weather App | 2022\nForecast dashboard\n\nBudget Tracker\nPersonal finance CLI"

    result = parse_projects(text)

    assert list(result) == ["weather_app", "budget_tracker"]
    assert result["weather_app"].timeframe == "2022"
    assert result["budget_tracker"].description == "Personal finance CLI"


def test_bullet_list_is_one_project_per_bullet():
    text = (
        "• Weather App - React Native mobile app\n"
        "• Budget Tracker - Personal finance CLI (2022)\n"
        "• Discord Bot - Python bot with 50+ commands (2023)"
    )

    result = parse_projects(text)

    assert list(result) == ["weather_app", "budget_tracker", "discord_bot"]
    assert result["weather_app"].description == "React Native mobile app"
    assert result["budget_tracker"].timeframe == "2022"
    assert result["discord_bot"].description == "Python bot with 50+ commands"
    assert result["discord_bot"].timeframe == "2023"


def test_duplicate_titles_get_unique_keys():
    result = parse_projects("Portfolio\nFirst version\n\nPortfolio\nRedesign")

    assert list(result) == ["portfolio", "portfolio_2"]
    assert result["portfolio_2"].description == "Redesign"


def test_title_without_letters_falls_back_to_ordinal_key():
    result = parse_projects("2021\nUntitled hackathon entry")

    assert list(result) == ["project_1"]
    assert result["project_1"].timeframe == "2021"


def test_split_timeframe():
    config = ProjectsConfig()
    assert split_timeframe("Portfolio Site | Jan 2022 - Mar 2022", config) == ("Portfolio Site", "Jan 2022 - Mar 2022")
    assert split_timeframe("Weather App (2023)", config) == ("Weather App", "2023")
    assert split_timeframe("Weather App", config) == ("Weather App", "")


def test_empty_text():
    assert parse_projects("") == {}
