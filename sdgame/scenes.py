"""Scenes and the stack that runs them."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

S = TypeVar("S", bound="Scene")


class SceneState(Enum):
    """Where a scene is in its lifecycle."""

    IDLE = "idle"
    LOADED = "loaded"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class Scene:
    """A screen of the game holding entities that it updates and draws.

    Entities are objects with ``update()`` and ``draw()`` methods and,
    optionally, ``post_update()``. Subclasses override the hooks they need.
    """

    def __init__(self) -> None:
        self.entities: List[Any] = []
        self.state = SceneState.IDLE

    def init(self) -> None:
        """Prepare the scene when it is pushed onto the running stack."""
        self.load_content()
        self.on_start()

    def close(self) -> None:
        """Tear the scene down when it leaves the running stack."""
        self.on_end()

    def load_content(self) -> None:
        """Called right before the scene starts."""
        self.state = SceneState.LOADED

    def on_start(self) -> None:
        """Called on the scene's first frame."""
        self.state = SceneState.RUNNING

    def on_end(self) -> None:
        """Called on the scene's last frame."""
        self.state = SceneState.ENDED

    def on_pause(self) -> None:
        """Called when another scene is started on top of this one."""
        self.state = SceneState.PAUSED

    def on_resume(self) -> None:
        """Called when the scene on top of this one stops."""
        self.state = SceneState.RUNNING

    def update(self) -> None:
        """Update every entity; called once per frame while current."""
        for entity in list(self.entities):
            entity.update()

    def post_update(self) -> None:
        """Run each entity's post-update step after :meth:`update`."""
        for entity in list(self.entities):
            hook = getattr(entity, "post_update", None)
            if hook is not None:
                hook()

    def draw(self) -> None:
        """Draw every entity; called once per frame while current."""
        for entity in self.entities:
            entity.draw()


class SceneRunner:
    """A stack of scenes; only the top one is updated and drawn.

    Starting and stopping is queued and takes effect at the next
    :meth:`update`.
    """

    def __init__(self) -> None:
        self._scenes: List[Scene] = []
        self._new_scene: Optional[Scene] = None
        self._removing = False
        self._replacing = False
        self._starting = False

    @property
    def current_scene(self) -> Optional[Scene]:
        """The top scene, or None when nothing is running."""
        return self._scenes[-1] if self._scenes else None

    def start_scene(self, scene: Scene, replace_current: bool = True) -> None:
        """Queue ``scene`` to start, ending the current scene or pausing it."""
        self._starting = True
        self._new_scene = scene
        self._replacing = replace_current

    def stop_current_scene(self) -> None:
        """Queue the current scene to stop, resuming the one beneath."""
        self._removing = True

    def update(self) -> None:
        """Apply queued changes, then update the current scene."""
        self._process_changes()
        current = self.current_scene
        if current is not None:
            current.update()
            current.post_update()

    def draw(self) -> None:
        current = self.current_scene
        if current is not None:
            current.draw()

    def _process_changes(self) -> None:
        if self._removing:
            current = self.current_scene
            if current is not None:
                current.close()
                self._scenes.pop()
                remaining = self.current_scene
                if remaining is not None:
                    remaining.on_resume()
            self._removing = False
            self._replacing = False  # no second removal in the same frame

        new_scene = self._new_scene
        if new_scene is None:
            return

        current = self.current_scene
        if self._replacing:
            if current is not None:
                current.on_end()
                current.close()
                self._scenes.pop()
            self._replacing = False
        elif current is not None:
            current.on_pause()

        self._starting = False
        self._scenes.append(new_scene)
        new_scene.init()

        # The new scene may have queued another one while starting.
        if not self._starting:
            self._new_scene = None


class SceneCache:
    """Holds one instance of each registered scene type."""

    def __init__(self) -> None:
        self._scenes: Dict[type, Scene] = {}

    def register_scene(self, scene_type: Type[Scene]) -> None:
        """Create and store an instance of ``scene_type``."""
        if not (isinstance(scene_type, type) and issubclass(scene_type, Scene)):
            raise TypeError(f"{scene_type!r} is not a Scene subclass")
        if scene_type in self._scenes:
            raise ValueError(f"duplicate scene type {scene_type.__name__} is not allowed")
        self._scenes[scene_type] = scene_type()

    def get_scene(self, scene_type: Type[S]) -> Optional[S]:
        """The stored instance of ``scene_type``, or None."""
        scene = self._scenes.get(scene_type)
        return scene if isinstance(scene, scene_type) else None

    def __len__(self) -> int:
        return len(self._scenes)


class SceneMgr:
    """Registers scene types and runs them."""

    def __init__(self) -> None:
        self._runner = SceneRunner()
        self._cache = SceneCache()
        self._persistent: List[Any] = []

    def start(self, scene_type: Type[Scene], replace_current: bool = True) -> bool:
        """Queue the registered scene of ``scene_type``; False if it is not registered."""
        scene = self._cache.get_scene(scene_type)
        if scene is None:
            return False
        self._runner.start_scene(scene, replace_current)
        return True

    def stop_current(self) -> None:
        """Queue the current scene to stop."""
        self._runner.stop_current_scene()

    def register(self, scene_type: Type[Scene]) -> None:
        self._cache.register_scene(scene_type)

    def get(self, scene_type: Type[S]) -> Optional[S]:
        return self._cache.get_scene(scene_type)

    def __len__(self) -> int:
        return len(self._cache)

    def update(self) -> None:
        self._runner.update()

    def draw(self) -> None:
        self._runner.draw()

    @property
    def current_scene(self) -> Optional[Scene]:
        return self._runner.current_scene

    @property
    def persistent_entities(self) -> List[Any]:
        """Entities kept alive across scene changes."""
        return self._persistent