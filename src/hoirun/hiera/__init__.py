from hoirun.hiera.document import HieraDocument
from hoirun.hiera.rewriter import HieraRewriter

__all__ = ["HieraDocument", "HieraRewriter"]
