import logging
import re
from pathlib import Path
from typing import Any, Optional

import numpy as np

from objstream.config import ParserConfig
from objstream.errors import ObjError, ObjReadError
from objstream.formats.elements import ElementIterator
from objstream.formats.importer import CallbackResult, Importer
from objstream.formats.parser import ReadSummary, read
from objstream.geometry import Mesh3D

logger = logging.getLogger(__name__)


class MeshBuilder(Importer):
    """Importer that collects every record of a file and assembles a :class:`Mesh3D`."""

    NAME_REGEX = re.compile(r'_\d+$')
    """Strip a trailing numeric suffix from file stems (e.g., 'chair_0001' -> 'chair')"""

    def __init__(self,
                 name: str = "mesh",
                 max_errors: Optional[int] = None,
                 min_face_vertices: int = 3):
        """
        Args:
            name: Name given to the built mesh
            max_errors: Stop reading once this many line errors were seen. ``None`` never stops.
            min_face_vertices: Faces with fewer indices are dropped
        """
        if max_errors is not None and max_errors < 1:
            raise ValueError(f"max_errors must be a positive integer, got {max_errors!r}")
        if min_face_vertices < 1:
            raise ValueError(f"min_face_vertices must be a positive integer, got {min_face_vertices!r}")

        self.name = name
        self.max_errors = max_errors
        self.min_face_vertices = min_face_vertices

        self.vertices: list[tuple[Any, Any, Any, Any]] = []
        self.texcoords: list[tuple[Any, Any, Any]] = []
        self.polygons: list[list[int]] = []
        self.comments: list[str] = []
        self.errors: list[ObjError] = []
        self.truncated_faces = 0
        self.dropped_faces = 0

    def comment(self, text: str) -> CallbackResult:
        self.comments.append(text)
        return CallbackResult.CONTINUE

    def error(self, error: ObjError) -> CallbackResult:
        logger.debug("%s: %s", self.name, error)
        self.errors.append(error)
        if self.max_errors is not None and len(self.errors) >= self.max_errors:
            logger.warning(f"{self.name}: stopping after {len(self.errors)} errors")
            return CallbackResult.STOP
        return CallbackResult.CONTINUE

    def v(self, x, y, z, w) -> CallbackResult:
        self.vertices.append((x, y, z, 1.0 if w is None else w))
        return CallbackResult.CONTINUE

    def vt(self, u, v, w) -> CallbackResult:
        self.texcoords.append((u, v, 0.0 if w is None else w))
        return CallbackResult.CONTINUE

    def f(self, elements: ElementIterator) -> CallbackResult:
        polygon = list(elements)
        if elements.truncated:
            self.truncated_faces += 1
            logger.warning(f"{self.name}: face {len(self.polygons) + 1} truncated at {elements.rejected!r}")
        if len(polygon) < self.min_face_vertices:
            self.dropped_faces += 1
            logger.warning(f"{self.name}: dropping face with {len(polygon)} vertices")
            return CallbackResult.CONTINUE
        self.polygons.append(polygon)
        return CallbackResult.CONTINUE

    def build(self) -> Mesh3D:
        """
        Assemble the collected records.

        Returns:
            Mesh3D object

        Raises:
            ValueError: If a face references a vertex that was never defined
        """
        n_vertices = len(self.vertices)
        for face_number, polygon in enumerate(self.polygons, start=1):
            out_of_range = [index for index in polygon if index >= n_vertices]
            if out_of_range:
                raise ValueError(
                    f"face {face_number} of {self.name} references vertex {out_of_range[0] + 1}, "
                    f"only {n_vertices} defined"
                )

        data = np.asarray(self.vertices, dtype=np.float32).reshape(-1, 4)
        return Mesh3D(vertices=data[:, :3],
                      polygons=self.polygons,
                      name=self.name,
                      weights=data[:, 3],
                      texcoords=np.asarray(self.texcoords, dtype=np.float32).reshape(-1, 3))

    def read(self, source, config: Optional[ParserConfig] = None) -> ReadSummary:
        """Feed ``source`` into this builder."""
        return read(source, self, config)

    @staticmethod
    def from_obj_file(path: Path, config: Optional[ParserConfig] = None, **kwargs) -> Mesh3D:
        """
        Load Mesh3D from OBJ file.

        Args:
            path: Path to .obj file
            config: Parser settings
            **kwargs: Forwarded to :class:`MeshBuilder`

        Returns:
            Mesh3D object
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if not path.is_file():
            raise ValueError(f"Not a file: {path}")

        kwargs.setdefault("name", re.sub(MeshBuilder.NAME_REGEX, '', path.stem))
        builder = MeshBuilder(**kwargs)

        config = config if config is not None else ParserConfig()
        try:
            with open(path, 'rb') as f:
                summary = builder.read(f, config)
        except OSError as e:
            raise ObjReadError(f"failed to read {path}: {e}") from e

        logger.info(f"Read {path}: {summary.lines} lines, {len(builder.vertices)} vertices, "
                    f"{len(builder.polygons)} faces, {len(builder.errors)} errors")
        return builder.build()
