from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """運行区間（始発駅 + 終着駅）"""

    source: str
    destination: str

    def __post_init__(self) -> None:
        for station in (self.source, self.destination):
            if not isinstance(station, str):
                raise ValueError(f"Station must be a string: {station!r}")
        if not self.source.strip():
            raise ValueError("Source station cannot be empty")
        if not self.destination.strip():
            raise ValueError("Destination station cannot be empty")

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"
