from . import authorize_acceptjs
from . import interfaces
