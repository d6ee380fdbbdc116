from dataclasses import dataclass, field

# Attribute name -> key in the persisted feed, in output order
FEED_KEYS = {
    "source": "source",
    "company": "company",
    "req_id": "reqId",
    "title": "title",
    "department": "department",
    "location": "location",
    "remote": "remote",
    "employment_type": "employmentType",
    "posted_at": "postedAt",
    "apply_url": "applyUrl",
    "description_html": "descriptionHtml",
    "tags": "tags",
}


@dataclass
class JobRecord:
    source: str  # "greenhouse", "workday", "custom"
    company: str
    req_id: str
    title: str
    apply_url: str
    department: str | None = None
    location: str | None = None
    remote: bool = False
    employment_type: str | None = None
    posted_at: str | None = None  # as given upstream, not reformatted
    description_html: str | None = None
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key in FEED_KEYS.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "JobRecord":
        """Build a record from a camelCase feed row, applying the normalizer defaults."""
        from normalize import normalize

        fields = {attr: data.get(key) for attr, key in FEED_KEYS.items()}
        return normalize(**fields)


@dataclass
class CompanyEntry:
    company: str
    type: str
    params: dict = field(default_factory=dict)  # token, base, or a custom descriptor

    @classmethod
    def from_dict(cls, data: dict) -> "CompanyEntry":
        params = {k: v for k, v in data.items() if k not in ("company", "type")}
        return cls(company=data["company"], type=data.get("type", "custom"), params=params)
