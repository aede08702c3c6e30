from .detail import Detail
