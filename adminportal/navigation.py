from flask import redirect, render_template, url_for


class FlaskNavigator:
    """Remembers where a component wants to go; the view turns it into a response.

    Routes are blueprint endpoints, e.g. 'dashboard.dashboard_view'.
    """

    def __init__(self):
        self.target = None
        self.delay_ms = 0

    def go_to(self, route, delay_ms=0):
        self.target = route
        self.delay_ms = delay_ms

    @property
    def pending(self):
        return self.target is not None

    def response(self):
        url = url_for(self.target)
        if self.delay_ms:
            # Let the welcome message show before moving on
            return render_template('redirect.html', url=url,
                                   delay_seconds=self.delay_ms / 1000)
        return redirect(url)


class RecordingNavigator:

    def __init__(self):
        self.visits = []

    def go_to(self, route, delay_ms=0):
        self.visits.append((route, delay_ms))

    @property
    def last(self):
        return self.visits[-1][0] if self.visits else None
