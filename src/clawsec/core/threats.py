# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Static threat registry keyed by threat id.

A single table shared by the executive summary (attack vector, technical
impact, remediation text) and the OWASP mapper (category ids).  Threat ids
that only appear in the compliance table carry no technical text and fall
back to the generic entry.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ThreatProfile:
    threat_id: str
    name: str
    owasp: tuple[str, ...] = ()
    attack_vector: str | None = None
    technical_impact: str | None = None
    remediation: str | None = None


FALLBACK_THREAT = ThreatProfile(
    threat_id="",
    name="Unmapped configuration issue",
    owasp=("LLM02",),
    attack_vector="Abuse of the misconfigured setting through the agent's exposed interfaces",
    technical_impact="weakened security posture of the agent runtime",
    remediation="Review the finding evidence and apply the documented configuration fix",
)

DEFAULT_OWASP_CATEGORY = FALLBACK_THREAT.owasp[0]


def _profile(threat_id: str, name: str, owasp: tuple[str, ...], *text: str) -> ThreatProfile:
    attack_vector, technical_impact, remediation = text if text else (None, None, None)
    return ThreatProfile(
        threat_id=threat_id,
        name=name,
        owasp=owasp,
        attack_vector=attack_vector,
        technical_impact=technical_impact,
        remediation=remediation,
    )


THREAT_REGISTRY: dict[str, ThreatProfile] = {
    p.threat_id: p
    for p in (
        _profile(
            "T001", "Weak or Default Gateway Token", ("LLM01",),
            "Brute-force or guess the gateway token and authenticate to the agent gateway",
            "full control of the agent runtime and every connected tool",
            "Generate a random 32-byte gateway token (openssl rand -hex 32) and restart the gateway",
        ),
        _profile(
            "T002", "Public Gateway Exposure", ("LLM01", "LLM06"),
            "Connect to the gateway directly from the internet on its public bind address",
            "remote exploitation of every exposed gateway endpoint",
            "Bind the gateway to 127.0.0.1 and reach it remotely through an SSH tunnel or VPN",
        ),
        _profile(
            "T003", "Unrestricted Tool Execution", ("LLM01", "LLM02"),
            "Inject instructions that make the agent call the exec tool with arbitrary commands",
            "arbitrary command execution with the agent's privileges",
            "Set tools.exec.policy to allowlist and enumerate the permitted commands",
        ),
        _profile(
            "T004", "Unencrypted Session Storage", ("LLM05",),
            "Read plaintext session files after gaining file system access",
            "disclosure of conversation history and any secrets pasted into it",
            "Enable session encryption with a randomly generated key",
        ),
        _profile(
            "T005", "Exposed Secrets in Configuration", ("LLM05",),
            "Harvest hardcoded API keys and tokens from the configuration file or its git history",
            "unauthorized use of third-party accounts and services",
            "Move secrets to environment variables and rotate every exposed credential",
        ),
        _profile(
            "T006", "No Rate Limiting", ("LLM02",),
            "Flood the gateway with automated requests or brute-force attempts",
            "resource exhaustion and unbounded API spend",
            "Configure gateway rate limiting with a per-client request budget",
        ),
        _profile("T007", "Database Connection String Exposure", ("LLM02",)),
        _profile(
            "T008", "Default Port Usage", ("LLM02",),
            "Locate the gateway by scanning its well-known default port",
            "faster reconnaissance of the deployment",
            "Move the gateway to a non-default port or behind a reverse proxy",
        ),
        _profile("T009", "Insecure Memory File Permissions", ("LLM04",)),
        _profile("T010", "Unsafe Skill Installation Sources", ("LLM03", "LLM04")),
        _profile(
            "T011", "Telegram Bot Token in Configuration", ("LLM03",),
            "Reuse the plaintext bot token against the Telegram bot API",
            "bot impersonation and interception of channel messages",
            "Load the bot token from TELEGRAM_BOT_TOKEN and rotate it via BotFather",
        ),
        _profile(
            "T012", "No Telegram Chat ID Whitelist", ("LLM05", "LLM10"),
            "Message the bot from any Telegram account",
            "unauthenticated users issuing agent commands",
            "Restrict the bot to an allowed_chats list",
        ),
        _profile("T013", "Missing Tool Input Validation", ("LLM06",)),
        _profile("T014", "No Request Size Limits", ("LLM10",)),
        _profile("T015", "No Input Sanitization", ("LLM01",)),
        _profile("T016", "Recursive Tool Call Loops", ("LLM10",)),
        _profile("T017", "Tool Authentication Bypass", ("LLM06",)),
        _profile("T018", "Unverified LLM Provider Endpoints", ("LLM03",)),
        _profile("T019", "PII in Memory Files", ("LLM02",)),
        _profile("T020", "XSS in Web Channel Outputs", ("LLM05",)),
        _profile("T021", "API Keys in Error Messages", ("LLM02",)),
        _profile("T022", "Missing Circuit Breakers", ("LLM10",)),
        _profile("T023", "Missing Tool Execution Logging", ("LLM06",)),
        _profile("T024", "No Human-in-the-Loop Controls", ("LLM06",)),
        _profile("T025", "User-Controlled System Prompts", ("LLM04", "LLM07")),
        _profile("T026", "Autonomous Financial Transactions", ("LLM06",)),
        _profile("T027", "Broad File System Access", ("LLM06",)),
        _profile("T028", "Automated Deployment Without Review", ("LLM09",)),
        _profile("T029", "LLM-Generated Security Policies", ("LLM09",)),
        _profile("T030", "Missing Package Signature Verification", ("LLM03",)),
        _profile("T031", "Medical/Legal Advice from LLM", ("LLM09",)),
        _profile("T032", "No Token Budget Controls", ("LLM10",)),
        _profile("T033", "Uncapped Tool Execution Loops", ("LLM10",)),
        _profile("T034", "Debug Mode Exposing System Prompts", ("LLM07",)),
        _profile("T035", "Malicious RAG Document Injection", ("LLM08",)),
        _profile("T036", "Vector Database Poisoning", ("LLM08",)),
        _profile("T037", "No Fact-Checking for LLM Outputs", ("LLM09",)),
    )
}


def get_threat_profile(threat_id: str | None) -> ThreatProfile:
    """Return the registry entry for *threat_id* with fallback text filled in.

    Unknown ids get :data:`FALLBACK_THREAT` itself (with the id set).
    """
    tid = threat_id or ""
    profile = THREAT_REGISTRY.get(tid)
    if profile is None:
        return replace(FALLBACK_THREAT, threat_id=tid)
    return replace(
        profile,
        attack_vector=profile.attack_vector or FALLBACK_THREAT.attack_vector,
        technical_impact=profile.technical_impact or FALLBACK_THREAT.technical_impact,
        remediation=profile.remediation or FALLBACK_THREAT.remediation,
    )
