import re
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
PACKAGE_DIR = ROOT_DIR / "daily_logger"
ROUTERS_DIR = PACKAGE_DIR / "web" / "routers"


def test_routers_do_not_import_application_module():
    for router_file in ROUTERS_DIR.glob("*_router.py"):
        source = router_file.read_text(encoding="utf-8")
        assert re.search(r"^\s*from\s+daily_logger\.application\s+import\b", source, flags=re.MULTILINE) is None
        assert re.search(r"^\s*import\s+daily_logger\.application\b", source, flags=re.MULTILINE) is None


def test_package_init_has_no_application_side_effect_import():
    package_init = (PACKAGE_DIR / "__init__.py").read_text(encoding="utf-8")
    assert ".application import" not in package_init


def test_asgi_entrypoint_exports_application_symbols():
    asgi_entrypoint = (PACKAGE_DIR / "asgi.py").read_text(encoding="utf-8")
    assert "from .application import app, create_app" in asgi_entrypoint


def test_repositories_never_commit():
    for repository_file in (PACKAGE_DIR / "repositories").glob("*_repository.py"):
        source = repository_file.read_text(encoding="utf-8")
        assert ".commit()" not in source


def test_services_package_does_not_import_export_service():
    services_init = (PACKAGE_DIR / "services" / "__init__.py").read_text(encoding="utf-8")
    assert "export_service" not in services_init.split('"""')[-1]
