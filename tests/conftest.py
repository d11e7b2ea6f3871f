import pytest

from painter3d import Camera, Cube, Renderer, RenderConfig, RecordingSurface, Scene


@pytest.fixture
def camera():
    return Camera()


@pytest.fixture
def cube_scene():
    scene = Scene()
    cube = scene.add(Cube(1))
    return scene, cube


@pytest.fixture
def renderer():
    return Renderer(RenderConfig())


@pytest.fixture
def surface():
    return RecordingSurface(640, 480)
