from objstream.builders.mesh_builder import MeshBuilder

__all__ = ['MeshBuilder']
