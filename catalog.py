"""Compiled-in list of topics and practice tests."""
from __future__ import annotations

from models import ContentKind, Topic

TOPICS: tuple[Topic, ...] = (
    Topic("security-controls", "Security Controls"),
    Topic("encryption", "Encryption"),
    Topic("hashing", "Hashing"),
    Topic("digital-signatures", "Digital Signatures"),
    Topic("digital-certificates", "Digital Certificates"),
    Topic("threat-actor-types", "Threat Actor Types"),
    Topic("threat-vectors-attack-surfaces", "Threat Vectors & Attack Surfaces"),
    Topic("social-engineering", "Social Engineering"),
    Topic("security-vulnerabilities", "Security Vulnerabilities"),
    Topic("malware-attacks", "Malware Attacks"),
    Topic("network-attacks", "Network Attacks"),
    Topic("application-attacks", "Application Attacks"),
    Topic("indicators-malicious-activity", "Indicators of Malicious Activity"),
    Topic("data-protection-concepts", "Data Protection Concepts"),
    Topic("resilience-recovery", "Resilience & Recovery"),
    Topic("wireless-security-settings", "Wireless Security Settings"),
    Topic("application-security", "Application Security"),
    Topic("vulnerability-management", "Vulnerability Management"),
    Topic("secure-network-protocols", "Secure Network Protocols"),
    Topic("access-controls", "Access Controls"),
    Topic("password-concepts", "Password Concepts"),
    Topic("incident-response-activities", "Incident Response Activities"),
    Topic("risk-management-concepts", "Risk Management Concepts"),
    Topic("agreement-types", "Agreement Types"),
    Topic("penetration-testing", "Penetration Testing"),
)

PRACTICE_TESTS: tuple[Topic, ...] = (Topic("practice-test2", "Practice Test 2"),)


def find_entry(content_id: str) -> tuple[Topic, ContentKind] | None:
    for topic in TOPICS:
        if topic.id == content_id:
            return topic, ContentKind.TOPIC
    for test in PRACTICE_TESTS:
        if test.id == content_id:
            return test, ContentKind.PRACTICE_TEST
    return None
