"""
Import validation tests.

These tests ensure all modules can be imported successfully, catching
issues like missing dependencies or circular imports BEFORE deployment.

Run with: pytest tests/unit/test_imports.py -v
"""

import importlib
from pathlib import Path

import pytest

PACKAGE_PATH = Path(__file__).parent.parent.parent / "src" / "formbridge_support"


class TestHandlerImports:
    """Verify all handler modules can be imported without errors."""

    @pytest.mark.parametrize("module_name,attribute", [
        ("formbridge_support.handlers.main", "lambda_handler"),
        ("formbridge_support.handlers.health_check", "lambda_handler"),
        ("formbridge_support.handlers.support_chat", "lambda_handler"),
        ("formbridge_support.handlers.knowledge", "search_handler"),
        ("formbridge_support.handlers.knowledge", "entry_handler"),
    ])
    def test_handler_import(self, module_name: str, attribute: str):
        """Each handler module should import and expose its entry point."""
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            pytest.fail(f"Failed to import {module_name}: {e}")
        assert hasattr(module, attribute), f"{module_name} missing {attribute}"


class TestServiceImports:
    """Verify all service modules can be imported."""

    @pytest.mark.parametrize("module_name", [
        "formbridge_support.services.bedrock_service",
        "formbridge_support.services.knowledge_store",
        "formbridge_support.services.search_service",
        "formbridge_support.services.confidence_service",
        "formbridge_support.services.prompt_service",
        "formbridge_support.services.selection_help",
        "formbridge_support.services.suggestion_service",
        "formbridge_support.services.support_chat_service",
    ])
    def test_service_import(self, module_name: str):
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            pytest.fail(f"Failed to import {module_name}: {e}")


class TestModelAndUtilImports:
    """Verify model, data, config and utility modules can be imported."""

    @pytest.mark.parametrize("module_name", [
        "formbridge_support.models.chat",
        "formbridge_support.models.knowledge",
        "formbridge_support.data.knowledge_entries",
        "formbridge_support.config.settings",
        "formbridge_support.utils.logging_config",
        "formbridge_support.utils.error_handling",
        "formbridge_support.utils.validators",
    ])
    def test_module_import(self, module_name: str):
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            pytest.fail(f"Failed to import {module_name}: {e}")


class TestNoSrcPrefix:
    """Ensure no modules use 'from src.' imports (breaks in Lambda)."""

    @pytest.mark.parametrize("subpackage", ["handlers", "services", "models", "utils", "config", "data"])
    def test_no_src_prefix(self, subpackage: str):
        for py_file in (PACKAGE_PATH / subpackage).glob("*.py"):
            content = py_file.read_text()
            assert "from src." not in content, f"{py_file.name} contains 'from src.' import"
            assert "import src." not in content, f"{py_file.name} contains 'import src.' import"


class TestBundledCorpus:
    """The shipped knowledge base must load cleanly at cold start."""

    def test_default_store_loads(self):
        from formbridge_support.models.knowledge import Category
        from formbridge_support.services.knowledge_store import KnowledgeStore

        store = KnowledgeStore.load_default()

        assert len(store) > 0
        for category in Category:
            assert store.by_category(category), f"no entries for {category.value}"

    def test_related_entries_resolve(self):
        from formbridge_support.services.knowledge_store import KnowledgeStore

        store = KnowledgeStore.load_default()
        for entry in store.all_entries():
            for related_id in entry.related_entries:
                assert store.get_entry(related_id) is not None, f"{entry.id} -> {related_id}"
