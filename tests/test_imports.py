"""Test module for verifying filedatacache imports.

This module tests:
1. Core package imports
2. Public API re-exports
3. Submodule imports
"""


class TestCoreImports:
    """Test core package imports."""

    def test_import_package(self):
        """Test that the main package can be imported."""
        import filedatacache
        assert filedatacache is not None

    def test_import_version(self):
        """Test that version information is accessible."""
        from filedatacache import __version__
        assert isinstance(__version__, str)

    def test_public_api(self):
        """Everything in __all__ resolves."""
        import filedatacache

        for name in filedatacache.__all__:
            assert getattr(filedatacache, name) is not None


class TestSubmoduleImports:
    """Test that submodules expose the same objects as the top level."""

    def test_cache_module(self):
        from filedatacache import FileDataCache
        from filedatacache.io.cache import FileDataCache as Direct
        assert FileDataCache is Direct

    def test_core_module(self):
        from filedatacache.core import CacheConfig, ConfigurationError, LoaderError
        from filedatacache.core.exceptions import FileDataCacheError
        assert issubclass(ConfigurationError, FileDataCacheError)
        assert issubclass(LoaderError, FileDataCacheError)
        assert CacheConfig is not None

    def test_probe_module(self):
        from filedatacache.io.probe import BaseProbe, OSFilesystemProbe
        assert issubclass(OSFilesystemProbe, BaseProbe)
