from __future__ import annotations

from datasalad.settings import Setting


class ConfigItem(Setting):
    """Configuration item with an optional value coercer

    This is the item type produced by all configuration sources of
    :class:`~ghq_core.config.ConfigManager`. Values read from Git
    configuration are always ``str``. A ``coercer`` can be attached (e.g.,
    to an implementation default) to convert them on access via
    :attr:`value`.
    """

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.pristine_value!r})'
