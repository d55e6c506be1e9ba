from prometheus_client import Counter


class ClubverseMetrics:
    """
    Business counters for the auth and reservation paths

    Exposed on /metrics. Label values are a small closed set
    (success / invalid_credentials / ...), never user data.
    """

    def __init__(self) -> None:
        self.user_registrations = Counter(
            'clubverse_user_registrations_total',
            'Registration attempts',
            ['result'],  # success / validation_error / duplicate_user
        )

        self.login_attempts = Counter(
            'clubverse_login_attempts_total',
            'Login attempts',
            ['result'],  # success / invalid_credentials
        )

        self.auth_gate_rejections = Counter(
            'clubverse_auth_gate_rejections_total',
            'Requests rejected by the auth gate',
            ['reason'],  # unauthorized / token_error / invalid_user
        )

        self.reservations_created = Counter(
            'clubverse_reservations_created_total',
            'Reservations persisted',
        )

        self.notifications = Counter(
            'clubverse_notifications_total',
            'Confirmation email dispatch outcomes',
            ['result'],  # sent / failed
        )

    def record_registration(self, *, result: str) -> None:
        self.user_registrations.labels(result=result).inc()

    def record_login(self, *, result: str) -> None:
        self.login_attempts.labels(result=result).inc()

    def record_auth_rejection(self, *, reason: str) -> None:
        self.auth_gate_rejections.labels(reason=reason).inc()

    def record_reservation(self) -> None:
        self.reservations_created.inc()

    def record_notification(self, *, result: str) -> None:
        self.notifications.labels(result=result).inc()


# Global metrics instance
metrics = ClubverseMetrics()
