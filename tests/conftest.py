# conftest.py - pytest configuration
import pytest

from diffindent.config import POLICIES, SCANNERS, FormatConfig


@pytest.fixture(params=SCANNERS)
def scanner(request):
    """Run a test once per block scanner."""
    return request.param


@pytest.fixture(params=POLICIES)
def policy(request):
    """Run a test once per indent policy."""
    return request.param


@pytest.fixture
def config(scanner, policy):
    return FormatConfig(policy=policy, scanner=scanner)
