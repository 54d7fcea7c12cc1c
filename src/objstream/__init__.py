"""Streaming parser for Wavefront OBJ geometry files."""

from objstream.builders import MeshBuilder
from objstream.config import ParserConfig
from objstream.errors import ErrorType, ObjError, ObjReadError
from objstream.formats import (
    CallbackResult,
    ElementIterator,
    Importer,
    Lexer,
    Line,
    ObjParser,
    ReadSummary,
    TagKind,
    Token,
    TokenType,
    classify,
    read,
    tokenize,
)
from objstream.geometry import Mesh3D

__all__ = [
    'CallbackResult',
    'ElementIterator',
    'ErrorType',
    'Importer',
    'Lexer',
    'Line',
    'Mesh3D',
    'MeshBuilder',
    'ObjError',
    'ObjParser',
    'ObjReadError',
    'ParserConfig',
    'ReadSummary',
    'TagKind',
    'Token',
    'TokenType',
    'classify',
    'read',
    'tokenize',
]
