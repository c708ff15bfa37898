from typing import Any, ClassVar, Dict

from pydantic import BaseModel


class SignalDescriptor:
    """Return `$namespace.field` on the class, real value on an instance."""

    def __init__(self, field_name: str, namespace: str) -> None:
        self.field_name = field_name
        self.namespace = namespace

    def __get__(self, instance, owner):
        #  class access  →  Datastar signal reference
        if instance is None:
            return f"${self.namespace}.{self.field_name}"

        #  instance access  →  behave like a normal attribute
        return instance.__dict__[self.field_name]


class SignalModel(BaseModel):
    """Base class for models that are mirrored to the browser as Datastar signals."""

    signal_namespace: ClassVar[str] = ""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        if not cls.signal_namespace:
            cls.signal_namespace = cls.__name__.lower()

        # Create signal descriptors for all model fields
        for field_name in cls.model_fields:
            setattr(cls, f"S{field_name}", SignalDescriptor(field_name, cls.signal_namespace))

    @property
    def signals(self) -> Dict[str, Any]:
        """Namespaced signals payload for this snapshot."""
        return {self.signal_namespace: self.model_dump()}
