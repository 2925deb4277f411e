from services.booking.domain.service import NamingLookup


class PlaceholderNamingLookup(NamingLookup):
    """車両・サービス名の仮実装

    本来の名称解決サービスが用意されるまでの代替。
    車両は ID の先頭 5 文字、サービスは件数のみを返す。
    """

    UNKNOWN_VEHICLE = "Unknown Vehicle"
    NO_SERVICES = "No Services"

    def describe_vehicle(self, vehicle_id: str | None) -> str:
        if not vehicle_id:
            return self.UNKNOWN_VEHICLE
        return f"Vehicle {vehicle_id[:5]}..."

    def describe_services(self, service_ids: list[str] | None) -> str:
        if not service_ids:
            return self.NO_SERVICES
        return f"{len(service_ids)} Service(s) Selected"
