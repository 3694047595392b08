"""
Camera package.

Canonical imports:
- `from camera.camera import enumerate_cameras, release_cameras`
- `from camera.backends.opencv import OpenCVCamera, resolve_backend`
- `from camera.info import report, query_camera_info, decode_fourcc`
"""
