"""onto-triggers - Text-expansion triggers derived from OWL ontologies.

Reads an OWL ontology (RDF/XML) and produces an espanso-style
``packages.yml`` with one or more trigger records per class and
object property.

Architecture:
- ontology/: graph loading, English label resolution, IRI qualification, term extraction
- expansion/: trigger synthesis strategies and match record collections
- pipeline: orchestration of extraction, synthesis and reporting
- report: YAML serialization of the match collection
"""

__version__ = "0.1.0"
