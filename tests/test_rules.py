# File: tests/test_rules.py
import re
import threading
from dataclasses import FrozenInstanceError

import pytest

import robots_validate.rules.table as table_module
from robots_validate.rules import RobotRule, VerificationResult, filter_by_agent, load_rules


def test_table_order_and_names():
    assert [rule.name for rule in load_rules()] == ["Apple", "Baidu", "Bing", "Google", "Yahoo", "Yandex"]


def test_load_rules_is_memoized():
    assert load_rules() is load_rules()


def test_load_rules_builds_once_across_threads(monkeypatch):
    monkeypatch.setattr(table_module, "_rules", None)
    seen = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        seen.append(load_rules())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 8
    assert all(rules is seen[0] for rules in seen)


@pytest.mark.parametrize(
    "hostname,expected",
    [
        ("crawl-66-249-66-1.googlebot.com", "Google"),
        ("rate-limited-proxy-66-249-90-77.google.com", "Google"),
        ("msnbot-157-55-39-1.search.msn.com", "Bing"),
        ("baiduspider-180-76-15-5.crawl.baidu.com", "Baidu"),
        ("spider-5-255-253-1.yandex.com", "Yandex"),
        ("b115.crawl.yahoo.net", "Yahoo"),
        ("17-58-101-179.applebot.apple.com", "Apple"),
        ("googlebot.com.attacker.example", None),
        ("host.example.com", None),
    ],
)
def test_domain_patterns(hostname, expected):
    matched = next((rule.name for rule in load_rules() if rule.matches_hostname(hostname)), None)
    assert matched == expected


@pytest.mark.parametrize(
    "agent,expected",
    [
        ("Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)", {"Google"}),
        ("Mozilla/5.0 (compatible; bingbot/2.0; +http://www.bing.com/bingbot.htm)", {"Bing"}),
        ("Mozilla/5.0 (compatible; Baiduspider/2.0)", {"Baidu"}),
        ("Mozilla/5.0 (compatible; YandexBot/3.0; +http://yandex.com/bots)", {"Yandex"}),
        ("Mozilla/5.0 (compatible; Yahoo! Slurp)", {"Yahoo"}),
        ("Mozilla/5.0 (Macintosh) Safari/605.1.15 (Applebot/0.1)", {"Apple"}),
        ("curl/8.4.0", set()),
    ],
)
def test_filter_by_agent(agent, expected):
    assert {rule.name for rule in filter_by_agent(load_rules(), agent)} == expected


@pytest.mark.parametrize("agent", [None, ""])
def test_filter_without_agent_keeps_everything(agent):
    rules = load_rules()
    assert filter_by_agent(rules, agent) == rules


def test_filter_without_agent_is_superset_of_any_agent():
    everything = set(filter_by_agent(load_rules(), None))
    for agent in ("Googlebot", "bingbot", "YandexBot", "curl/8.4.0"):
        assert set(filter_by_agent(load_rules(), agent)) <= everything


def test_rule_without_agent_always_passes():
    rules = [
        RobotRule(name="Any", domain=re.compile(r"\.example\.org$")),
        RobotRule(name="Picky", domain=re.compile(r"\.example\.net$"), agent=re.compile("Picky")),
    ]
    assert [rule.name for rule in filter_by_agent(rules, "SomethingElse/1.0")] == ["Any"]


def test_rule_requires_name_and_domain():
    with pytest.raises(ValueError):
        RobotRule(name="", domain=re.compile(r"\.example\.org$"))
    with pytest.raises(ValueError):
        RobotRule(name="Empty", domain=re.compile(""))


def test_result_is_an_immutable_copy():
    rule = load_rules()[3]
    result = VerificationResult.from_rule(rule, "crawl.googlebot.com", "66.249.66.1")

    assert result.as_dict() == {
        "name": "Google",
        "agent": rule.agent.pattern,
        "domain": rule.domain.pattern,
        "hostname": "crawl.googlebot.com",
        "ip_address": "66.249.66.1",
    }
    with pytest.raises(FrozenInstanceError):
        result.name = "Spoofed"  # type: ignore[misc]


@pytest.mark.parametrize("agent", ["bingbot/2.0", "BingPreview/1.0b", "msnbot/2.0b"])
def test_result_keeps_pattern_flags(agent):
    bing = next(rule for rule in load_rules() if rule.name == "Bing")
    result = VerificationResult.from_rule(bing, "msnbot-1.search.msn.com", "157.55.39.1")

    assert bing.matches_agent(agent)
    assert result.agent.search(agent) is not None
    assert result.agent.flags & re.IGNORECASE
    assert result.domain.search(result.hostname) is not None


@pytest.mark.parametrize(
    "agent,accepted",
    [
        ("Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)", True),
        ("Googlebot-Image/1.0", True),
        ("Mozilla/5.0 (compatible; Google-InspectionTool/1.0)", True),
        ("googlebot/2.1", True),
        ("Google-Extended", True),
        ("Googler/1.0", False),
        ("MyGooglebotClone/1.0", False),
        ("GooglebotX/1.0", False),
        ("curl/8.4.0", False),
    ],
)
def test_google_agent_pattern(agent, accepted):
    google = next(rule for rule in load_rules() if rule.name == "Google")
    assert google.matches_agent(agent) is accepted
