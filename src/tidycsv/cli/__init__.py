"""tidycsv command line interface.

``cli`` loads on first access, so ``import tidycsv`` does not pull in the
command modules. The console script entry point is ``tidycsv.cli.main:main``.
"""

__all__ = ["cli"]


def __getattr__(name):
    if name == "cli":
        from .main import cli

        return cli
    raise AttributeError(name)
