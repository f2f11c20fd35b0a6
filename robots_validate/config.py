# === FILE: robots_validate/config.py ===
"""
Модуль для загрузки и валидации конфигурации верификатора роботов.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import enum
import errno
import ipaddress
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ("ErrorPolicy", "VerifierConfig", "load_config")


class ErrorPolicy(enum.Enum):
    """Что делать при сбое DNS-запроса: пробросить ошибку или вернуть «нет совпадения»."""

    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def from_flag(cls, fail_on_error: bool) -> ErrorPolicy:
        return cls.STRICT if fail_on_error else cls.LENIENT


class VerifierConfig(BaseModel):
    """Настройки верификатора и DNS-резолвера."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    fail_on_error: bool = Field(False, description="Пробрасывать ошибки резолвера вместо «нет совпадения».")
    nameservers: list[str] = Field(
        default_factory=list, description="DNS-серверы; пусто — взять из системного resolv.conf."
    )
    port: int = Field(53, ge=1, le=65535, description="Порт DNS-серверов.")
    timeout: float = Field(2.0, gt=0, description="Таймаут ожидания ответа одного сервера (секунд).")
    lifetime: float = Field(5.0, gt=0, description="Общий лимит времени на один запрос (секунд).")
    forward_ipv6: bool = Field(False, description="Для IPv6-адресов запрашивать AAAA вместо A.")

    @field_validator("nameservers")
    def _check_nameservers(cls, v: list[str]) -> list[str]:
        for server in v:
            try:
                ipaddress.ip_address(server)
            except ValueError as exc:
                raise ValueError(f"Nameserver должен быть IP-адресом, получено {server!r}") from exc
        return v

    @property
    def policy(self) -> ErrorPolicy:
        """Политика ошибок по умолчанию, выведенная из fail_on_error."""
        return ErrorPolicy.from_flag(self.fail_on_error)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> VerifierConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект VerifierConfig.
    Без пути возвращает настройки по умолчанию; отсутствующий файл — FileNotFoundError.
    """
    if path is None:
        return VerifierConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return VerifierConfig(**data)
