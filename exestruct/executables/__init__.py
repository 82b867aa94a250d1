'''
The executable formats known to exestruct, in the order they are tried
during autodetection.
'''
from .ddave import DDaveHandler
from .nomad import NomadHandler


HANDLERS = [
    DDaveHandler(),
    NomadHandler(),
]
