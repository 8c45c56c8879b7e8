"""Effect decorator for declaring branch render callbacks on a class."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

# Attribute name to store effect metadata on methods
EFFECT_ATTR = "__textual_store_effects__"


class EffectRegistration:
    """Stores effect registration info on a method."""

    __slots__ = ("branches",)

    def __init__(self) -> None:
        self.branches: list[str] = []

    def add(self, branch: str) -> None:
        if branch not in self.branches:
            self.branches.append(branch)


def get_effect_registration(method: Callable[..., Any]) -> EffectRegistration | None:
    """Get effect registration from a method, if any."""
    return getattr(method, EFFECT_ATTR, None)


def effect(*branches: str) -> Callable[[F], F]:
    """
    Decorator to mark a method as the render callback of state branches.

    The method is called with ``(new_branch, old_branch)`` whenever the
    branch is a new object.

    Args:
        *branches: Names of the branches to render.

    Example:
        ```python
        class TitleView(StoreView):
            @effect("title")
            def render_title(self, new: Branch, old: Branch | None):
                self.query_one("#title", Static).update(new.text)

            @effect("title", "content")  # multiple branches
            def log_change(self, new, old):
                self.log(new)
        ```
    """
    if not branches:
        raise ValueError("@effect requires at least one branch")

    def decorator(method: F) -> F:
        # Get or create registration
        registration = get_effect_registration(method)
        if registration is None:
            registration = EffectRegistration()
            setattr(method, EFFECT_ATTR, registration)

        for branch in branches:
            registration.add(branch)

        return method

    return decorator


def collect_effects(obj: Any) -> dict[str, Callable[[Any, Any], None]]:
    """
    Build the branch to render callback mapping for an instance.

    Branches keep the order in which their methods are defined. When
    several methods render the same branch they are called in definition
    order.

    Args:
        obj: An instance whose class has ``@effect`` methods.

    Returns:
        Branch name to callable taking ``(new_branch, old_branch)``.
    """
    handlers: dict[str, list[Callable[[Any, Any], None]]] = {}
    seen: set[str] = set()

    # Walk the MRO base-first so subclass definitions come last
    for klass in reversed(type(obj).__mro__):
        for attr_name, class_attr in vars(klass).items():
            if attr_name in seen:
                continue
            registration = get_effect_registration(class_attr)
            if registration is None:
                continue
            # Overrides are resolved through getattr on the instance
            method = getattr(obj, attr_name)
            if get_effect_registration(method) is None:
                continue
            seen.add(attr_name)
            for branch in get_effect_registration(method).branches:
                handlers.setdefault(branch, []).append(method)

    renderers: dict[str, Callable[[Any, Any], None]] = {}
    for branch, methods in handlers.items():
        if len(methods) == 1:
            renderers[branch] = methods[0]
        else:
            renderers[branch] = _chain(methods)
    return renderers


def _chain(methods: list[Callable[[Any, Any], None]]) -> Callable[[Any, Any], None]:
    def render(new: Any, old: Any) -> None:
        for method in methods:
            method(new, old)

    return render
