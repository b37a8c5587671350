"""Human-readable chat messages for DNSimple events.

Messages read ``[<account>] <actor> <what happened>`` and use Slack's
``<url|label>`` markup to link back to the resource in DNSimple.
"""

from typing import Any, Callable, Optional

from strillone.events.envelope import Event

DEFAULT_BASE_URL = "https://dnsimple.com"


def slack_link(url: str, label: str) -> str:
    """Return a Slack formatted link."""
    return f"<{url}|{label}>"


class _Links:
    """Builds links to resources of the event's account."""

    def __init__(self, event: Event, base_url: str) -> None:
        self.event = event
        self.base_url = base_url.rstrip("/")

    @property
    def account_url(self) -> str:
        account_id = self.event.account.id if self.event.account else None
        if account_id is None:
            return self.base_url
        return f"{self.base_url}/a/{account_id}"

    def domain(self, domain: dict[str, Any]) -> str:
        name = domain.get("name") or domain.get("unicode_name") or "unknown"
        return slack_link(f"{self.account_url}/domains/{name}", name)

    def zone(self, zone: dict[str, Any]) -> str:
        name = zone.get("name") or "unknown"
        return slack_link(f"{self.account_url}/domains/{name}/records", name)

    def record(self, record: dict[str, Any]) -> str:
        zone = record.get("zone_id") or "unknown"
        label = _record_label(record)
        return slack_link(f"{self.account_url}/domains/{zone}/records/{record.get('id')}", label)

    def contact(self, contact: dict[str, Any]) -> str:
        label = contact.get("label") or " ".join(
            part for part in (contact.get("first_name"), contact.get("last_name")) if part
        )
        return slack_link(f"{self.account_url}/contacts/{contact.get('id')}", label or "contact")

    def certificate(self, certificate: dict[str, Any]) -> str:
        common_name = certificate.get("common_name") or "certificate"
        return slack_link(
            f"{self.account_url}/domains/{certificate.get('domain_id')}/certificates/{certificate.get('id')}",
            common_name,
        )

    def webhook(self, webhook: dict[str, Any]) -> str:
        url = webhook.get("url") or "webhook"
        return slack_link(f"{self.account_url}/webhooks", url)


def _record_label(record: dict[str, Any]) -> str:
    name = record.get("name") or ""
    zone = record.get("zone_id") or ""
    fqdn = f"{name}.{zone}" if name and zone else (name or zone)
    return f"{record.get('type', 'record')} {fqdn}".strip()


def _account_name(event: Event) -> str:
    if event.account is None:
        return "unknown account"
    return event.account.display or event.account.identifier or str(event.account.id)


def _actor_name(event: Event) -> str:
    if event.actor is None:
        return "Someone"
    return event.actor.pretty or event.actor.entity or "Someone"


Describer = Callable[[Event, _Links], Optional[str]]


def _domain(verb: str) -> Describer:
    def describe(event: Event, links: _Links) -> Optional[str]:
        domain = event.resource("domain")
        if not domain:
            return None
        return f"{verb} the domain {links.domain(domain)}"

    return describe


def _zone(verb: str) -> Describer:
    def describe(event: Event, links: _Links) -> Optional[str]:
        zone = event.resource("zone")
        if not zone:
            return None
        return f"{verb} the zone {links.zone(zone)}"

    return describe


def _record(verb: str) -> Describer:
    def describe(event: Event, links: _Links) -> Optional[str]:
        record = event.resource("zone_record")
        if not record:
            return None
        return f"{verb} the record {links.record(record)}"

    return describe


def _contact(verb: str) -> Describer:
    def describe(event: Event, links: _Links) -> Optional[str]:
        contact = event.resource("contact")
        if not contact:
            return None
        return f"{verb} the contact {links.contact(contact)}"

    return describe


def _certificate(verb: str) -> Describer:
    def describe(event: Event, links: _Links) -> Optional[str]:
        certificate = event.resource("certificate")
        if not certificate:
            return None
        return f"{verb} the certificate {links.certificate(certificate)}"

    return describe


def _webhook(verb: str) -> Describer:
    def describe(event: Event, links: _Links) -> Optional[str]:
        webhook = event.resource("webhook")
        if not webhook:
            return None
        return f"{verb} the webhook {links.webhook(webhook)}"

    return describe


def _delegation_change(event: Event, links: _Links) -> Optional[str]:
    domain = event.resource("domain")
    if not domain:
        return None
    servers = event.data.get("name_servers")
    text = f"changed the delegation for the domain {links.domain(domain)}"
    if isinstance(servers, list) and servers:
        text += f" to {', '.join(str(s) for s in servers)}"
    return text


def _account_update(event: Event, links: _Links) -> Optional[str]:
    return f"updated the {slack_link(links.account_url, 'account')} settings"


DESCRIBERS: dict[str, Describer] = {
    "account.update": _account_update,
    "account.billing_settings_update": _account_update,
    "certificate.issue": _certificate("issued"),
    "certificate.reissue": _certificate("reissued"),
    "certificate.remove_private_key": _certificate("removed the private key of"),
    "contact.create": _contact("created"),
    "contact.update": _contact("updated"),
    "contact.delete": _contact("deleted"),
    "domain.auto_renewal_disable": _domain("disabled auto-renewal for"),
    "domain.auto_renewal_enable": _domain("enabled auto-renewal for"),
    "domain.create": _domain("created"),
    "domain.delete": _domain("deleted"),
    "domain.delegation_change": _delegation_change,
    "domain.register": _domain("registered"),
    "domain.renew": _domain("renewed"),
    "domain.resolution_disable": _domain("disabled resolution for"),
    "domain.resolution_enable": _domain("enabled resolution for"),
    "domain.transfer": _domain("transferred"),
    "domain.transfer_lock_disable": _domain("disabled the transfer lock for"),
    "domain.transfer_lock_enable": _domain("enabled the transfer lock for"),
    "webhook.create": _webhook("created"),
    "webhook.delete": _webhook("deleted"),
    "whois_privacy.disable": _domain("disabled WHOIS privacy for"),
    "whois_privacy.enable": _domain("enabled WHOIS privacy for"),
    "zone.create": _zone("created"),
    "zone.delete": _zone("deleted"),
    "zone_record.create": _record("created"),
    "zone_record.update": _record("updated"),
    "zone_record.delete": _record("deleted"),
}


def format_message(event: Event, base_url: str = DEFAULT_BASE_URL) -> str:
    """Format an event as a single chat message.

    Args:
        event: Parsed event
        base_url: DNSimple site used for resource links

    Returns:
        Message text
    """
    links = _Links(event, base_url)
    describer = DESCRIBERS.get(event.name)
    description = describer(event, links) if describer else None
    if description is None:
        description = f"performed {event.name}"
    return f"[{_account_name(event)}] {_actor_name(event)} {description}"
