from shared.settings import Settings
from product_catalogue.service.catalogue import Catalogue
from product_catalogue.models import Product

def test_settings_defaults():
    fresh = Settings(_env_file=None)
    assert fresh.SEARCH_KEYWORD_CASE_SENSITIVE is True
    assert fresh.LOG_LEVEL == "INFO"

def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("SEARCH_KEYWORD_CASE_SENSITIVE", "false")
    monkeypatch.setenv("DEFAULT_CATALOGUE_NAME", "Warehouse 7")
    fresh = Settings(_env_file=None)
    assert fresh.SEARCH_KEYWORD_CASE_SENSITIVE is False
    assert fresh.DEFAULT_CATALOGUE_NAME == "Warehouse 7"

def test_catalogue_picks_up_keyword_setting(monkeypatch):
    from shared.settings import settings
    monkeypatch.setattr(settings, "SEARCH_KEYWORD_CASE_SENSITIVE", False)
    cat = Catalogue("from settings")
    cat.add_product(Product.create("A1", "Steamed Bun", 1, 0, 2.0))
    assert cat.keyword_case_sensitive is False
    assert cat.search({"keyword": "bun"}).searchedProducts == ["A1"]
