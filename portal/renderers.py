from rest_framework.renderers import TemplateHTMLRenderer


class PortalHTMLRenderer(TemplateHTMLRenderer):
    """Template renderer whose error responses use the portal error page."""

    exception_template_names = ['portal/erro.html']
