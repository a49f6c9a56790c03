import pytest
from rich.console import Console

from library_system import main
from library_system.config import settings
from library_system.library import Library
from library_system.utils import cli_config, ui_helpers
from library_system.utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture
def lib():
    # Her test için yeni, boş bir kütüphane
    return Library()

@pytest.fixture
def scenario_lib(lib):
    lib.add_book(1, "Dune", 2)
    lib.add_book(2, "Duty", 0)
    lib.add_user(10, "Alice")
    return lib

@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    # Tercih dosyasını geçici dizine yönlendir
    monkeypatch.setattr(settings, "cli_config_dir", str(tmp_path / "cli"))
    monkeypatch.setattr(settings, "output_mode", "plain")
    # setenv + delenv so that teardown also removes a mode set during the test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    monkeypatch.delenv(OUTPUT_MODE_ENV)
    # Plain, wide consoles: no colour codes, no wrapping, no "press Enter" pause
    plain = Console(force_terminal=False, no_color=True, width=200)
    monkeypatch.setattr(main, "console", plain)
    monkeypatch.setattr(ui_helpers, "_console", plain)
    monkeypatch.setattr(cli_config, "console", plain)
