"""Built-in raw taxonomy tables.

``LOCAL_TAXONOMY`` is the base catalog; ``LOCAL_ADDITIONS`` is merged on top of it
(and on top of a remote base, when one is fetched). Both use the legacy record
shape (``nome`` / ``subcategorias`` / ``itens``) and go through the normalizer.
"""

from typing import Any

OTHER = {"nome": "Outros", "itens": ["Caixa para escrever"]}

LOCAL_TAXONOMY: list[dict[str, Any]] = [
    {
        "nome": "Britagem",
        "subcategorias": [
            {
                "nome": "Britadores",
                "itens": [
                    "Britador de Mandíbulas",
                    "Britador Cônico",
                    "Britador de Impacto",
                    "Britador de Rolos",
                    "Rebritador",
                    "Britador Giratório",
                    "Britador Móvel",
                ],
            },
            {
                "nome": "Peças",
                "itens": [
                    "Mandíbulas",
                    "Revestimentos de britador",
                    "Barras de impacto",
                    "Chapas de desgaste",
                    "Engrenagens (Coroa e Pinhão)",
                    "Eixos",
                    "Buchas de bronze",
                    "Polias",
                    "Molas",
                    "Mancais",
                ],
            },
            {"nome": "Serviços", "itens": ["Manutenção", "Revisão", "Reformas", "Motores"]},
            {
                "nome": "Aluguel",
                "itens": [
                    "Britador móvel",
                    "Planta móvel (Unidade Móvel de Britagem)",
                    "Britador",
                    "Planta Britagem",
                ],
            },
            OTHER,
        ],
    },
    {
        "nome": "Peneiramento",
        "subcategorias": [
            {
                "nome": "Peneiras",
                "itens": ["Peneira Vibratória", "Peneira Trommel", "Peneira Fixa", "Peneira Rotativa", "Peneira Móvel"],
            },
            {
                "nome": "Peças",
                "itens": [
                    "Telas metálicas",
                    "Telas de borracha",
                    "Grelhas",
                    "Engrenagens",
                    "Eixos",
                    "Buchas",
                    "Mancais",
                    "Molas",
                    "Motovibrador",
                ],
            },
            {"nome": "Serviços", "itens": ["Manutenção preventiva e corretiva"]},
            {"nome": "Aluguel", "itens": ["Peneira móvel"]},
            OTHER,
        ],
    },
    {
        "nome": "Moinhos",
        "subcategorias": [
            {"nome": "Moinhos", "itens": ["Moinho de Barra", "Moinho Vertical", "Moinho de Bolas", "Moinho SAG, FAG"]},
            {"nome": "Serviços", "itens": ["Manutenção", "Reforma", "Revisão"]},
            {"nome": "Aluguel", "itens": ["Moinhos"]},
            OTHER,
        ],
    },
    {
        "nome": "Perfuração",
        "subcategorias": [
            {
                "nome": "Perfuratrizes",
                "itens": [
                    "Perfuratriz Rotativa",
                    "Perfuratriz Hidráulica",
                    "Perfuratriz Pneumática",
                    "Perfuratriz Elétrica",
                    "Perfuratriz Subterrânea",
                    "Rompedor Hidráulico",
                    "Rompedor Pneumático",
                ],
            },
            {
                "nome": "Peças",
                "itens": [
                    "Brocas para rochas",
                    "Varetas de extensão",
                    "Coroas diamantadas",
                    "Hastes",
                    "Pastilhas de desgaste",
                    "Engrenagens",
                    "Eixos",
                    "Buchas",
                    "Mancais",
                    "Molas",
                    "Pontas",
                    "Martelos",
                ],
            },
            {"nome": "Serviços", "itens": ["Manutenção", "Revisão", "Reforma"]},
            {"nome": "Aluguel", "itens": ["Perfuratrizes", "Rompedores"]},
            OTHER,
        ],
    },
    {
        "nome": "Detonação",
        "subcategorias": [
            {
                "nome": "Produtos",
                "itens": [
                    "Explosivo Dinamite",
                    "Explosivo Civis",
                    "Explosivo ANFO",
                    "Explosivo Industrial",
                    "Detonador Elétrico",
                    "Detonador Não Elétrico",
                    "Cordéis detonadores",
                    "Drop Ball",
                    "Esferas",
                ],
            },
        ],
    },
    {
        "nome": "Linha Amarela / Fora de Estrada",
        "subcategorias": [
            {
                "nome": "Máquinas",
                "itens": [
                    "Carregadeiras",
                    "Escavadeiras",
                    "Retroescavadeiras",
                    "Tratores",
                    "Motoniveladoras",
                    "Caminhões Fora-de-Estrada",
                    "Caminhões de Apoio",
                    "Rolo Compactador",
                ],
            },
            {
                "nome": "Peças e Componentes",
                "itens": [
                    "Caçambas",
                    "Braços e lanças",
                    "Lâminas",
                    "Ripper / Subsolador",
                    "Cabines",
                    "Esteira",
                    "Chassis",
                    "Tanques",
                    "Cilindros hidráulicos",
                    "Bombas",
                    "Motores",
                    "Caixas de câmbio",
                    "Caixas de Transmissão",
                    "Eixos",
                    "Eixos diferenciais",
                    "Faróis",
                    "Painéis elétricos / ECU",
                    "Joysticks",
                    "Cabos e chicotes elétricos",
                    "Pneus OTR",
                    "Rodas",
                    "Assentos",
                    "Cintos de segurança",
                    "Quick couplers e acopladores de implementos",
                    "Martelos hidráulicos",
                    "Implementos",
                ],
            },
            {"nome": "Serviços", "itens": ["Manutenção", "Revisão", "Reforma"]},
            {"nome": "Aluguel", "itens": ["Máquinas de linha amarela"]},
            OTHER,
        ],
    },
    {
        "nome": "Motores",
        "subcategorias": [
            {
                "nome": "Tipos",
                "itens": [
                    "Motores Diesel",
                    "Motores Eletricos",
                    "Motores Para exaustores industriais",
                    "Motores Para planta de britagem",
                    "Motores Para peneiramento",
                ],
            },
            {
                "nome": "Peças de Reposição",
                "itens": [
                    "Bloco do motor",
                    "Cabeçote",
                    "Válvulas",
                    "Pistões",
                    "Kits de pistão e anéis, bielas, bronzinas",
                    "Bombas",
                    "Injetores e bicos de combustível",
                    "Turbo / supercharger",
                    "Alternadores e motor de arranque",
                    "Correias",
                    "Polias",
                    "Filtros",
                    "Selos",
                    "Retentores",
                ],
            },
            {
                "nome": "Serviços",
                "itens": ["Manutenção", "Reforma", "Revisão", "Rebuild", "Retífica", "Testes e diagnósticos"],
            },
            OTHER,
        ],
    },
    {
        "nome": "Compressores",
        "subcategorias": [
            {
                "nome": "Compressores",
                "itens": [
                    "De ar para ferramentas pneumáticas",
                    "De ar para perfuratrizes",
                    "Compressores de parafuso",
                    "Compressores de pistão",
                    "Portáteis diesel",
                    "Portáteis elétricos",
                ],
            },
            {
                "nome": "Peças",
                "itens": [
                    "Pistões",
                    "Bielas",
                    "Rolamentos",
                    "Válvulas",
                    "Selos",
                    "Retentores",
                    "Correias",
                    "Polias",
                    "Filtros de ar",
                    "Filtros de óleo",
                    "Filtros de combustível",
                ],
            },
            {"nome": "Serviços", "itens": ["Manutenção", "Rebuild", "Troca de rolamentos", "Lubrificação"]},
            {"nome": "Aluguel", "itens": ["Compressores móveis"]},
            OTHER,
        ],
    },
    {
        "nome": "Geradores",
        "subcategorias": [
            {
                "nome": "Tipos",
                "itens": ["Diesel estacionários e portáteis", "Elétricos AC / DC", "Grupos geradores (Gensets)"],
            },
            {
                "nome": "Peças de reposição",
                "itens": [
                    "Motor diesel",
                    "Alternador",
                    "Painel",
                    "Conectores",
                    "Baterias",
                    "Filtros",
                    "Correias",
                    "Rolamentos",
                    "Selos",
                ],
            },
            {"nome": "Serviços", "itens": ["Manutenção", "Rebuild", "Teste de carga", "Substituição de baterias"]},
            OTHER,
        ],
    },
    {
        "nome": "Transformadores",
        "subcategorias": [
            {"nome": "Tipos", "itens": ["Potência", "Distribuição a seco", "Distribuição a óleo", "Móveis"]},
            {"nome": "Peças", "itens": ["Núcleo", "Bobinas", "Buchas", "Conectores", "Radiadores"]},
            {"nome": "Consumíveis", "itens": ["Óleo isolante", "Graxas", "Líquidos dielétricos"]},
            {"nome": "Serviços", "itens": ["Instalação", "Manutenção", "Teste de isolamento"]},
            OTHER,
        ],
    },
    {
        "nome": "Automação",
        "subcategorias": [
            {
                "nome": "Equipamentos",
                "itens": [
                    "CLP / PLC",
                    "SCADA / supervisórios",
                    "Sensores",
                    "Atuadores",
                    "Inversores / VFD",
                    "Painéis de comando e proteção",
                ],
            },
            {
                "nome": "Peças de reposição",
                "itens": [
                    "Módulos de CLP",
                    "Relés",
                    "Contactores",
                    "Sensores",
                    "Cabos",
                    "Displays HMI",
                    "Pilhas de memória",
                    "Ventoinhas",
                ],
            },
            {
                "nome": "Serviços",
                "itens": ["Programação", "Instalação", "Calibração", "Manutenção", "Revisão", "Reforma"],
            },
            OTHER,
        ],
    },
    {
        "nome": "Rolamentos",
        "subcategorias": [
            {
                "nome": "Tipos",
                "itens": [
                    "Esferas",
                    "Rolos cilíndricos, cônicos",
                    "Esféricos",
                    "Agulhas",
                    "Autocompensadores",
                    "Cruzados",
                    "Alta carga",
                    "Selados e blindados",
                ],
            },
            {"nome": "Serviços", "itens": ["Substituição", "Realinhamento", "Lubrificação", "Inspeção de desgaste"]},
        ],
    },
    {
        "nome": "Separadores Magnéticos e Detectores",
        "subcategorias": [
            {
                "nome": "Equipamentos",
                "itens": [
                    "Separadores de tambor magnético",
                    "Overband",
                    "Fluxo contínuo",
                    "Eletroímãs suspensos",
                    "Ímãs permanentes",
                    "Detector de metais (manual, industrial, alta frequência)",
                    "Transportadores magnéticos",
                    "Correias magnéticas",
                ],
            },
            {
                "nome": "Peças de reposição",
                "itens": ["Bobinas de cobre", "Cabos", "Chicotes", "Placas magnéticas", "Grades", "Rolos"],
            },
            {"nome": "Serviços", "itens": ["Manutenção", "Reforma", "Revisão", "Troca de componentes"]},
            OTHER,
        ],
    },
    {
        "nome": "Pneus",
        "subcategorias": [
            {"nome": "Tipos", "itens": ["Pneus OTR", "Industriais", "Sólidos", "Radiais e diagonais"]},
            {"nome": "Peças de reposição", "itens": ["Câmaras de ar", "Válvulas", "Sensores TPMS", "Flanges", "Aros"]},
            {
                "nome": "Serviços",
                "itens": [
                    "Montagem",
                    "Balanceamento",
                    "Recapagem",
                    "Inspeção",
                    "Rotação",
                    "Substituição de válvulas",
                ],
            },
            OTHER,
        ],
    },
]

# Categories and items added after the base catalog was frozen. Some entries use the
# older shapes (``name`` / ``subs`` / ``items``) the normalizer still accepts.
LOCAL_ADDITIONS: list[dict[str, Any]] = [
    {
        "nome": "Correias e Transportadores",
        "subcategorias": [
            {
                "nome": "Transportadores",
                "itens": [
                    "Correia transportadora",
                    "Correia em V",
                    "Correia dentada",
                    "Transportador de correia (TC)",
                    "Transportador helicoidal",
                    "Transportador de corrente",
                    "Alimentador vibratório",
                    "Empilhadeira de pátio",
                ],
            },
            {
                "nome": "Peças",
                "itens": [
                    "Emendas de correia",
                    "Grampos para correia",
                    "Raspadores de correia",
                    "Roletes de carga",
                    "Roletes de retorno",
                    "Tambores",
                    "Mancais",
                ],
            },
            {"nome": "Serviços", "itens": ["Vulcanização", "Manutenção", "Alinhamento", "Inspeção"]},
            OTHER,
        ],
    },
    {
        "name": "Britagem",
        "subs": [
            {"name": "Pecas", "items": ["Mandibulas", "Cones", "Manto e côncavo"]},
            {"name": "Serviços", "items": ["Troca de revestimentos"]},
        ],
    },
    {
        "nome": "Rolamentos",
        "subcategorias": [{"nome": "Peças", "itens": ["Gaiolas", "Anéis", "Vedações"]}, OTHER],
    },
]
