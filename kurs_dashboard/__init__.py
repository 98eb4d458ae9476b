"""
KursManager — Kursverwaltung Overview Dashboard

Analytics backend that turns the five Kursverwaltung record collections
(Dozenten, Räume, Teilnehmer, Kurse, Anmeldungen) into dashboard-ready
statistics.

To swap the workbook export for the live record service:
    Implement the loaders.RecordSource protocol with five async fetches
    against the service and hand it to service.DashboardService. Record
    shapes remain unchanged.

To connect a front end:
    Call DashboardService.load() (or dashboard.get_stats() on in-memory
    collections) and feed the Stats into the dashboard.get_* projections
    for cards, the status chart and the recent-courses table.

To add a course status:
    Add an entry to config.COURSE_STATUSES with its label and colour and a
    matching Stats field.
"""
