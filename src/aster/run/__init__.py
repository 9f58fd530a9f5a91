from aster.run.config import Config

__all__ = ['Config']
