from objstream.geometry.mesh import Mesh3D

__all__ = ['Mesh3D']
