"""SEO Doctor engine: readiness scoring and knowledge graph assembly."""
