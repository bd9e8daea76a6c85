from django.conf import settings
from django.utils.cache import patch_cache_control


class SecurityHeadersMiddleware:
    """Add security headers to every response and a default cache hint to API responses."""
    API_PREFIX = '/api/'

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        response.headers['X-DNS-Prefetch-Control'] = 'on'
        response.headers['Strict-Transport-Security'] = f'max-age={settings.HSTS_SECONDS}; includeSubDomains'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'origin-when-cross-origin'

        path = request.path or ''
        if path.startswith(self.API_PREFIX) and not response.has_header('Cache-Control'):
            fresh, stale = settings.LIST_CACHE_SECONDS
            patch_cache_control(response, public=True, s_maxage=fresh, stale_while_revalidate=stale)
        return response
