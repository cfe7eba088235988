from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send(self, *, to: str, subject: str, body: str) -> None:
        """Deliver one message; raise on failure."""

        raise NotImplementedError


@dataclass(frozen=True)
class SmtpSettings:
    server: str = "smtp.gmail.com"
    port: int = 587
    username: str = ""
    password: str = ""
    sender: Optional[str] = None

    @classmethod
    def from_dict(cls, cfg: dict) -> "SmtpSettings":
        return cls(
            server=str(cfg.get("server") or "smtp.gmail.com"),
            port=int(cfg.get("port") or 587),
            username=str(cfg.get("username") or ""),
            password=str(cfg.get("password") or ""),
            sender=cfg.get("sender") or None,
        )

    @property
    def from_address(self) -> str:
        return self.sender or self.username


class SmtpNotifier:
    """Plain-text mail over SMTP + STARTTLS, one connection per message."""

    def __init__(self, settings: SmtpSettings, *, timeout: float = 15.0):
        self._settings = settings
        self._timeout = timeout

    def send(self, *, to: str, subject: str, body: str) -> None:
        if not self._settings.username:
            raise RuntimeError("SMTP is not configured (SMTP_USERNAME is empty)")

        msg = MIMEText(body, "plain", "utf-8")
        msg["From"] = self._settings.from_address
        msg["To"] = to
        msg["Subject"] = subject

        with smtplib.SMTP(self._settings.server, self._settings.port, timeout=self._timeout) as server:
            server.ehlo()
            server.starttls()
            server.ehlo()
            server.login(self._settings.username, self._settings.password)
            server.send_message(msg)
        logger.debug("Mail sent to %s: %s", to, subject)


def notify_quietly(notifier: Notifier, *, to: str, subject: str, body: str) -> bool:
    """Best-effort delivery: failures are logged, never raised."""
    try:
        notifier.send(to=to, subject=subject, body=body)
        return True
    except Exception as e:
        logger.error("Email to %s failed: %s", to, e)
        return False
