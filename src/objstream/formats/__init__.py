"""OBJ text format: tag classifier, lexer, face index decoder, parser and importer interface."""

from objstream.formats.elements import ElementIterator
from objstream.formats.importer import CallbackResult, Importer
from objstream.formats.lexer import Lexer, LexerState, Token, TokenType, tokenize
from objstream.formats.parser import Line, ObjParser, ReadSummary, read
from objstream.formats.tag import Tag, TagKind, classify

__all__ = [
    'CallbackResult',
    'ElementIterator',
    'Importer',
    'Lexer',
    'LexerState',
    'Line',
    'ObjParser',
    'ReadSummary',
    'Tag',
    'TagKind',
    'Token',
    'TokenType',
    'classify',
    'read',
    'tokenize',
]
