# === FILE: robots_validate/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для проверки IP-адресов роботов через командную строку.

Команды:
  check     Проверить один или несколько IP-адресов (FCrDNS + таблица роботов)
  rules     Показать встроенную таблицу роботов
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию встроенные настройки)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда check опции:
  --agent, -a UA      Заявленный User-Agent клиента
  --strict/--lenient  Ошибка DNS прерывает проверку / считается «не робот»
  --json PATH         Сохранить JSON-отчёт в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)

Дополнительно:
  --version, -v       Показать версию robots_validate

Пример:
  robots-validate check 66.249.66.1 --agent "Googlebot/2.1" --pretty
"""
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import click

from robots_validate import __version__
from robots_validate.config import ErrorPolicy, load_config
from robots_validate.errors import ResolverError
from robots_validate.logger import init_logging, logger
from robots_validate.report import render_json
from robots_validate.resolver import build_resolver
from robots_validate.rules import load_rules
from robots_validate.verifier import Verifier

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


async def check_addresses(
    verifier: Verifier,
    ip_addresses: Sequence[str],
    agent: Optional[str] = None,
    policy: Optional[ErrorPolicy] = None,
) -> List[Dict[str, Any]]:
    """Проверяет адреса параллельно и возвращает записи для вывода в JSON."""
    results = await asyncio.gather(
        *(verifier.validate(ip, agent=agent, policy=policy) for ip in ip_addresses)
    )
    return [
        {'ip_address': ip, 'robot': result.as_dict() if result is not None else None}
        for ip, result in zip(ip_addresses, results)
    ]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='robots-validate, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Проверка принадлежности IP-адресов известным поисковым роботам."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('ip_addresses', nargs=-1, required=True)
@click.option('--agent', '-a', 'agent', default=None, help='Заявленный User-Agent клиента')
@click.option(
    '--strict/--lenient', 'strict',
    default=None,
    help='Ошибка DNS прерывает проверку (по умолчанию из fail_on_error)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def check(ctx, ip_addresses, agent, strict, json_output, pretty):
    """Проверить IP-адреса методом forward-confirmed reverse DNS."""
    cfg = ctx.obj['config']
    policy = None if strict is None else ErrorPolicy.from_flag(strict)
    verifier = Verifier(resolver=build_resolver(cfg), config=cfg)
    try:
        entries = asyncio.run(check_addresses(verifier, ip_addresses, agent, policy))
    except ResolverError as e:
        logger.error("Strict check aborted: %s", e)
        print_error(f'Ошибка DNS: {e}')

    if json_output:
        try:
            saved_json = render_json(entries, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        return

    indent = 2 if pretty else None
    click.echo(json.dumps(entries, ensure_ascii=False, indent=indent))


@cli.command('rules', context_settings=CONTEXT_SETTINGS)
def show_rules():
    """Показать встроенную таблицу роботов в JSON."""
    click.echo(json.dumps([rule.as_dict() for rule in load_rules()], ensure_ascii=False, indent=2))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
