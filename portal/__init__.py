"""InfoCare portal application.

This package contains the pages, validation serializers, API services and
route registrations of the server-rendered front-end for the InfoCare API.
"""
