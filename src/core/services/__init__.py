# page-render-core - Services
# Pure rendering services; src/components/page_render wraps them with ports
