"""Model and texture files for each fruit, loaded lazily on first use."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from weeninja.fruit import FruitType


@dataclass(frozen=True)
class WNModel:
    """The files that make up one fruit's model."""

    model_file: str
    texture_file: str


_MODELS = {
    FruitType.APPLE: WNModel(
        "resource/goodart/apple.obj", "resource/goodart/apple.png"
    ),
    FruitType.ORANGE: WNModel(
        "resource/goodart/orange.obj", "resource/goodart/orange.png"
    ),
    FruitType.KIWIFRUIT: WNModel(
        "resource/goodart/kiwifruit.obj", "resource/goodart/kiwifruit.png"
    ),
    FruitType.PINEAPPLE: WNModel(
        "resource/goodart/pineapple.obj", "resource/goodart/pineapple.png"
    ),
    FruitType.APPLE_HALF: WNModel(
        "resource/goodart/apple_half.obj",
        "resource/goodart/Apple_Half_Texture.png",
    ),
    FruitType.ORANGE_HALF: WNModel(
        "resource/goodart/orange_half.obj", "resource/goodart/orange_split.png"
    ),
    FruitType.KIWIFRUIT_HALF: WNModel(
        "resource/goodart/kiwifruit_half.obj",
        "resource/goodart/kiwifruit_half.png",
    ),
    FruitType.PINEAPPLE_HALF_TOP: WNModel(
        "resource/goodart/pineapple_half_top.obj",
        "resource/goodart/pineapple.png",
    ),
    FruitType.PINEAPPLE_HALF_BOTTOM: WNModel(
        "resource/goodart/pineapple_half_top.obj",
        "resource/goodart/pineapple.png",
    ),
}


def model_for(fruit_type: FruitType | int) -> WNModel:
    """Return the model files for a fruit kind."""
    return _MODELS[FruitType(fruit_type)]


@dataclass
class _Mesh:
    vertices: list[tuple[float, ...]] = field(default_factory=list)
    texcoords: list[tuple[float, ...]] = field(default_factory=list)
    faces: list[tuple[int, ...]] = field(default_factory=list)
    texture: Any = None


def _resolve_index(token: str, count: int) -> int:
    index = int(token)
    return index - 1 if index > 0 else count + index


def _load_obj_model(model_path: Path, texture_path: Path) -> _Mesh:
    """Read a Wavefront OBJ mesh and its texture image."""
    import pygame

    mesh = _Mesh()
    with open(model_path, encoding="utf-8") as handle:
        for line in handle:
            parts = line.split()
            if not parts:
                continue
            keyword, args = parts[0], parts[1:]
            if keyword == "v":
                mesh.vertices.append(tuple(float(a) for a in args[:3]))
            elif keyword == "vt":
                mesh.texcoords.append(tuple(float(a) for a in args[:2]))
            elif keyword == "f":
                mesh.faces.append(
                    tuple(
                        _resolve_index(a.split("/")[0], len(mesh.vertices))
                        for a in args
                    )
                )
    mesh.texture = pygame.image.load(str(texture_path))
    return mesh


class ModelCache:
    """Loads each fruit's model the first time it is asked for."""

    def __init__(
        self,
        loader: Callable[[Path, Path], Any] | None = None,
        root: str | Path = ".",
    ) -> None:
        self._loader = loader or _load_obj_model
        self._root = Path(root)
        self._loaded: dict[FruitType, Any] = {}

    def get(self, fruit_type: FruitType | int) -> Any:
        """Return the loaded model for a fruit kind, loading it if needed."""
        kind = FruitType(fruit_type)
        if kind not in self._loaded:
            files = _MODELS[kind]
            self._loaded[kind] = self._loader(
                self._root / files.model_file, self._root / files.texture_file
            )
        return self._loaded[kind]

    def is_loaded(self, fruit_type: FruitType | int) -> bool:
        """Tell whether a fruit kind's model has been loaded."""
        return FruitType(fruit_type) in self._loaded