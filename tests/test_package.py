"""Basic package tests for license-checker."""


def test_package_imports() -> None:
    """Test that the main package can be imported."""
    import license_checker

    assert license_checker.__version__ == "0.1.0"


def test_cli_imports() -> None:
    """Test that the CLI module can be imported."""
    from license_checker.cli import main

    assert main is not None


def test_subpackages_import() -> None:
    """Test that all subpackages can be imported."""
    import license_checker.analysis
    import license_checker.config
    import license_checker.models
    import license_checker.output
    import license_checker.resolvers

    assert license_checker.analysis is not None
    assert license_checker.config is not None
    assert license_checker.models is not None
    assert license_checker.output is not None
    assert license_checker.resolvers is not None
