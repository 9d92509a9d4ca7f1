"""
Exemple simple : catalogue produits paginé (grille de cards + pagination).
Résout le manifest en mode "render" puis "edit" et écrit le JSON résultant.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from page_binding import ManifestPage, ManifestResolver, StaticDataSource


def main(page: int = 2):
    manifest = ManifestPage(
        title="Catalogue {{site}}",
        variables={"site": "ACME"},
        blocks=[
            {
                "block_type": "paginated_data_block",
                "id": "catalog",
                "paginated_data": {"source": "products", "as": "products", "enable_pagination": True, "page_size": 2},
                "children": [
                    # Une card par produit de la page courante
                    {
                        "block_type": "repeater_block",
                        "id": "cards",
                        "children": [{
                            "block_type": "card_block",
                            "seed": {
                                "title":       "{{products.name}}",
                                "description": "{{products.price}} € — {{index}}/{{total}}",
                                "image_url":   "{{products.image}}",
                            },
                        }],
                    },
                    {"block_type": "pagination_block", "id": "pager", "structure": {"sibling_count": 1}},
                ],
            },
        ],
    )

    resolver = ManifestResolver(StaticDataSource())
    out_dir = Path(__file__).parent

    for mode in ("render", "edit"):
        resolved = resolver.resolve(manifest, mode=mode, page=page)
        output_path = out_dir / f"catalog_{mode}.json"
        output_path.write_text(resolved.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
        print(f"✅ {mode} : {len(resolved.blocks[0].children)} blocs → {output_path}")


if __name__ == "__main__":
    main()
