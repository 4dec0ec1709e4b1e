"""
Pytest configuration and shared fixtures for the jdl_angular test suite.
"""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest

from jdl_angular.config import GeneratorConfig
from jdl_angular.language import build_model_str


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def examples_dir(project_root):
    """Return the examples directory."""
    return project_root / "examples"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated code output."""
    temp_dir = tempfile.mkdtemp(prefix="jdl_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_gen_logging():
    """Drop handlers the CLI installs so every test starts from a clean jdl.gen logger."""
    yield
    logger = logging.getLogger("jdl.gen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def gen_caplog(caplog):
    """caplog wired directly to the jdl.gen logger, at DEBUG."""
    logger = logging.getLogger("jdl.gen")
    logger.addHandler(caplog.handler)
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.setLevel(previous)


@pytest.fixture
def write_jdl_file(temp_output_dir):
    """Factory fixture to write JDL content to a temporary file."""
    def _write(content: str, filename: str = "model.jdl") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _write


@pytest.fixture
def build_jdl_model():
    """Factory fixture to build a model from JDL content."""
    def _build(content: str, strict: bool = False):
        return build_model_str(content, strict=strict)
    return _build


@pytest.fixture
def make_config(temp_output_dir, monkeypatch):
    """Factory fixture for a GeneratorConfig writing into the temp directory."""
    for var in ("JDL_MICROSERVICE", "JDL_API_HOST", "JDL_PLURAL_STYLE", "JDL_STRICT"):
        monkeypatch.delenv(var, raising=False)

    def _make(**overrides):
        values = dict(
            jdl_file=temp_output_dir / "model.jdl",
            output_folder=temp_output_dir / "out",
            microservice="store",
            api_host="https://api.example.com",
        )
        values.update(overrides)
        return GeneratorConfig(**values)
    return _make


# Test data fixtures for common scenarios

@pytest.fixture
def store_jdl():
    """A small but complete document: enums, audited entity, relationships, comments."""
    return """
/* Block comments disappear,
   entity Hidden { secret String } included */

enum OrderStatus { PENDING, PAID, SHIPPED }

@EnableAudit
entity Customer {
    firstName String required
    email String required unique // login name
}

entity ProductOrder {
    placedDate Instant required
    status OrderStatus
    total BigDecimal min(0) max(1000)
}

entity OrderItem {
    quantity Integer required
}

// relationship OneToOne { Customer to Ghost }
relationship ManyToOne { ProductOrder(customer) to Customer(orders) }
relationship OneToMany { ProductOrder(items) to OrderItem(order) }
relationship ManyToOne { OrderItem to ProductOrder }
"""
