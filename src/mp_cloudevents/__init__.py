"""
mp_cloudevents – Versioned CloudEvents envelope model.

Import path convention::

    from mp_cloudevents.core import CloudEventBuilder, SpecVersion
    from mp_cloudevents.core.rw import CloudEventContextWriter
    from mp_cloudevents.kernel.errors import UnknownAttributeError
    from mp_cloudevents.config import CloudEventSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
