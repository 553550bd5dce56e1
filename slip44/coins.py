# Code generated by slip44/scripts/parse_coins.py; DO NOT EDIT.
"""SLIP-0044 coin types and their ticker symbols."""

from enum import unique

from slip44.core.registry import CoinType, SymbolType


@unique
class Coin(CoinType):
    # Coin type: 0
    # Symbol: BTC
    # Coin: Bitcoin
    Bitcoin = (0,), "Bitcoin", "BTC"

    # Coin type: 1
    # Coin: Testnet (all coins)
    Testnet = (1,), "Testnet (all coins)"

    # Coin type: 2
    # Symbol: LTC
    # Coin: Litecoin
    Litecoin = (2,), "Litecoin", "LTC"

    # Coin type: 3
    # Symbol: DOGE
    # Coin: Dogecoin
    Dogecoin = (3,), "Dogecoin", "DOGE"

    # Coin type: 4
    # Symbol: RDD
    # Coin: Reddcoin
    Reddcoin = (4,), "Reddcoin", "RDD"

    # Coin type: 5
    # Symbol: DASH
    # Coin: Dash
    Dash = (5,), "Dash", "DASH"

    # Coin type: 6
    # Symbol: PPC
    # Coin: Peercoin
    Peercoin = (6,), "Peercoin", "PPC"

    # Coin type: 7
    # Symbol: NMC
    # Coin: Namecoin
    Namecoin = (7,), "Namecoin", "NMC"

    # Coin type: 8
    # Symbol: FTC
    # Coin: Feathercoin
    Feathercoin = (8,), "Feathercoin", "FTC"

    # Coin type: 9
    # Symbol: XCP
    # Coin: Counterparty
    Counterparty = (9,), "Counterparty", "XCP"

    # Coin type: 10
    # Symbol: BLK
    # Coin: Blackcoin
    Blackcoin = (10,), "Blackcoin", "BLK"

    # Coin type: 11
    # Symbol: NSR
    # Coin: NuShares
    NuShares = (11,), "NuShares", "NSR"

    # Coin type: 12
    # Symbol: NBT
    # Coin: NuBits
    NuBits = (12,), "NuBits", "NBT"

    # Coin type: 13
    # Symbol: MZC
    # Coin: Mazacoin
    Mazacoin = (13,), "Mazacoin", "MZC"

    # Coin type: 14
    # Symbol: VIA
    # Coin: Viacoin
    Viacoin = (14,), "Viacoin", "VIA"

    # Coin type: 15
    # Symbol: XCH
    # Coin: ClearingHouse
    ClearingHouse = (15,), "ClearingHouse", "XCH"

    # Coin type: 16
    # Symbol: RBY
    # Coin: Rubycoin
    Rubycoin = (16,), "Rubycoin", "RBY"

    # Coin type: 17
    # Symbol: GRS
    # Coin: Groestlcoin
    Groestlcoin = (17,), "Groestlcoin", "GRS"

    # Coin type: 18
    # Symbol: DGC
    # Coin: Digitalcoin
    Digitalcoin = (18,), "Digitalcoin", "DGC"

    # Coin type: 19
    # Symbol: CCN
    # Coin: Cannacoin
    Cannacoin = (19,), "Cannacoin", "CCN"

    # Coin type: 20
    # Symbol: DGB
    # Coin: DigiByte
    DigiByte = (20,), "DigiByte", "DGB"

    # Coin type: 21
    # Coin: Open Assets
    OpenAssets = (21,), "Open Assets"

    # Coin type: 22
    # Symbol: MONA
    # Coin: Monacoin
    Monacoin = (22,), "Monacoin", "MONA"

    # Coin type: 23
    # Symbol: CLAM
    # Coin: Clams
    Clams = (23,), "Clams", "CLAM"

    # Coin type: 24
    # Symbol: XPM
    # Coin: Primecoin
    Primecoin = (24,), "Primecoin", "XPM"

    # Coin type: 25
    # Symbol: NEOS
    # Coin: Neoscoin
    Neoscoin = (25,), "Neoscoin", "NEOS"

    # Coin type: 26
    # Symbol: JBS
    # Coin: Jumbucks
    Jumbucks = (26,), "Jumbucks", "JBS"

    # Coin type: 27
    # Symbol: ZRC
    # Coin: ziftrCOIN
    ziftrCOIN = (27,), "ziftrCOIN", "ZRC"

    # Coin type: 28
    # Symbol: VTC
    # Coin: Vertcoin
    Vertcoin = (28,), "Vertcoin", "VTC"

    # Coin type: 29
    # Symbol: NXT
    # Coin: NXT
    NXT = (29,), "NXT", "NXT"

    # Coin type: 30
    # Symbol: BURST
    # Coin: Burst
    Burst = (30,), "Burst", "BURST"

    # Coin type: 31
    # Symbol: MUE
    # Coin: MonetaryUnit
    MonetaryUnit = (31,), "MonetaryUnit", "MUE"

    # Coin type: 32
    # Symbol: ZOOM
    # Coin: Zoom
    Zoom = (32,), "Zoom", "ZOOM"

    # Coin type: 33
    # Symbol: VASH
    # Coin: Virtual Cash
    VirtualCash = (33,), "Virtual Cash", "VASH"

    # Coin type: 34
    # Symbol: CDN
    # Coin: Canada eCoin
    CanadaeCoin = (34,), "Canada eCoin", "CDN"

    # Coin type: 35
    # Symbol: SDC
    # Coin: ShadowCash
    ShadowCash = (35,), "ShadowCash", "SDC"

    # Coin type: 36
    # Symbol: PKB
    # Coin: ParkByte
    ParkByte = (36,), "ParkByte", "PKB"

    # Coin type: 37
    # Symbol: PND
    # Coin: Pandacoin
    Pandacoin = (37,), "Pandacoin", "PND"

    # Coin type: 38
    # Symbol: START
    # Coin: StartCOIN
    StartCOIN = (38,), "StartCOIN", "START"

    # Coin type: 39
    # Symbol: MOIN
    # Coin: MOIN
    MOIN = (39,), "MOIN", "MOIN"

    # Coin type: 40
    # Symbol: EXP
    # Coin: Expanse
    Expanse = (40,), "Expanse", "EXP"

    # Coin type: 41
    # Symbol: EMC2
    # Coin: Einsteinium
    Einsteinium = (41,), "Einsteinium", "EMC2"

    # Coin type: 42
    # Symbol: DCR
    # Coin: Decred
    Decred = (42,), "Decred", "DCR"

    # Coin type: 43
    # Symbol: XEM
    # Coin: NEM
    NEM = (43,), "NEM", "XEM"

    # Coin type: 44
    # Symbol: PART
    # Coin: Particl
    Particl = (44,), "Particl", "PART"

    # Coin type: 45
    # Symbol: ARG
    # Coin: Argentum (dead)
    Argentum = (45,), "Argentum (dead)", "ARG"

    # Coin type: 46
    # Coin: Libertas
    Libertas = (46,), "Libertas"

    # Coin type: 47
    # Coin: Posw coin
    Poswcoin = (47,), "Posw coin"

    # Coin type: 48
    # Symbol: SHR
    # Coin: Shreeji
    Shreeji = (48,), "Shreeji", "SHR"

    # Coin type: 49
    # Symbol: GCR
    # Coin: Global Currency Reserve (GCRcoin)
    GlobalCurrencyReserve = (49,), "Global Currency Reserve (GCRcoin)", "GCR"

    # Coin type: 50
    # Symbol: NVC
    # Coin: Novacoin
    Novacoin = (50,), "Novacoin", "NVC"

    # Coin type: 51
    # Symbol: AC
    # Coin: Asiacoin
    Asiacoin = (51,), "Asiacoin", "AC"

    # Coin type: 52
    # Symbol: BTCD
    # Coin: BitcoinDark
    BitcoinDark = (52,), "BitcoinDark", "BTCD"

    # Coin type: 53
    # Symbol: DOPE
    # Coin: Dopecoin
    Dopecoin = (53,), "Dopecoin", "DOPE"

    # Coin type: 54
    # Symbol: TPC
    # Coin: Templecoin
    Templecoin = (54,), "Templecoin", "TPC"

    # Coin type: 55
    # Symbol: AIB
    # Coin: AIB
    AIB = (55,), "AIB", "AIB"

    # Coin type: 56
    # Symbol: EDRC
    # Coin: EDRCoin
    EDRCoin = (56,), "EDRCoin", "EDRC"

    # Coin type: 57
    # Symbol: SYS
    # Coin: Syscoin
    Syscoin = (57,), "Syscoin", "SYS"

    # Coin type: 58
    # Symbol: SLR
    # Coin: Solarcoin
    Solarcoin = (58,), "Solarcoin", "SLR"

    # Coin type: 59
    # Symbol: SMLY
    # Coin: Smileycoin
    Smileycoin = (59,), "Smileycoin", "SMLY"

    # Coin type: 60
    # Symbol: ETH
    # Coin: Ether
    Ethereum = (60,), "Ether", "ETH"

    # Coin type: 61
    # Symbol: ETC
    # Coin: Ether Classic
    EthereumClassic = (61,), "Ether Classic", "ETC"

    # Coin type: 62
    # Symbol: PSB
    # Coin: Pesobit
    Pesobit = (62,), "Pesobit", "PSB"

    # Coin type: 63
    # Symbol: LDCN
    # Coin: Landcoin (dead)
    Landcoin = (63,), "Landcoin (dead)", "LDCN"

    # Coin type: 64
    # Coin: Open Chain
    OpenChain = (64,), "Open Chain"

    # Coin type: 65
    # Symbol: XBC
    # Coin: Bitcoinplus
    Bitcoinplus = (65,), "Bitcoinplus", "XBC"

    # Coin type: 66
    # Symbol: IOP
    # Coin: Internet of People
    InternetofPeople = (66,), "Internet of People", "IOP"

    # Coin type: 67
    # Symbol: NXS
    # Coin: Nexus
    Nexus = (67,), "Nexus", "NXS"

    # Coin type: 68
    # Symbol: INSN
    # Coin: InsaneCoin
    InsaneCoin = (68,), "InsaneCoin", "INSN"

    # Coin type: 69
    # Symbol: OK
    # Coin: OKCash
    OKCash = (69,), "OKCash", "OK"

    # Coin type: 70
    # Symbol: BRIT
    # Coin: BritCoin
    BritCoin = (70,), "BritCoin", "BRIT"

    # Coin type: 71
    # Symbol: CMP
    # Coin: Compcoin
    Compcoin = (71,), "Compcoin", "CMP"

    # Coin type: 72
    # Symbol: CRW
    # Coin: Crown
    Crown = (72,), "Crown", "CRW"

    # Coin type: 73
    # Symbol: BELA
    # Coin: BelaCoin
    BelaCoin = (73,), "BelaCoin", "BELA"

    # Coin type: 74
    # Symbol: ICX
    # Coin: ICON
    ICON = (74,), "ICON", "ICX"

    # Coin type: 75
    # Symbol: FJC
    # Coin: FujiCoin
    FujiCoin = (75,), "FujiCoin", "FJC"

    # Coin type: 76
    # Symbol: MIX
    # Coin: MIX
    MIX = (76,), "MIX", "MIX"

    # Coin type: 77
    # Symbol: XVG
    # Coin: Verge Currency
    VergeCurrency = (77,), "Verge Currency", "XVG"

    # Coin type: 78
    # Symbol: EFL
    # Coin: Electronic Gulden
    ElectronicGulden = (78,), "Electronic Gulden", "EFL"

    # Coin type: 79
    # Symbol: CLUB
    # Coin: ClubCoin
    ClubCoin = (79,), "ClubCoin", "CLUB"

    # Coin type: 80
    # Symbol: RICHX
    # Coin: RichCoin
    RichCoin = (80,), "RichCoin", "RICHX"

    # Coin type: 81
    # Symbol: POT
    # Coin: Potcoin
    Potcoin = (81,), "Potcoin", "POT"

    # Coin type: 82
    # Symbol: QRK
    # Coin: Quarkcoin
    Quarkcoin = (82,), "Quarkcoin", "QRK"

    # Coin type: 83
    # Symbol: TRC
    # Coin: Terracoin
    Terracoin = (83,), "Terracoin", "TRC"

    # Coin type: 84
    # Symbol: GRC
    # Coin: Gridcoin
    Gridcoin = (84,), "Gridcoin", "GRC"

    # Coin type: 85
    # Symbol: AUR
    # Coin: Auroracoin
    Auroracoin = (85,), "Auroracoin", "AUR"

    # Coin type: 86
    # Symbol: IXC
    # Coin: IXCoin
    IXCoin = (86,), "IXCoin", "IXC"

    # Coin type: 87
    # Symbol: NLG
    # Coin: Gulden
    Gulden = (87,), "Gulden", "NLG"

    # Coin type: 88, 2301
    # Symbol: QTUM
    # Coin: QTUM
    QTUM = (88, 2301), "QTUM", "QTUM"

    # Coin type: 89
    # Symbol: BTA
    # Coin: Bata
    Bata = (89,), "Bata", "BTA"

    # Coin type: 90
    # Symbol: XMY
    # Coin: Myriadcoin
    Myriadcoin = (90,), "Myriadcoin", "XMY"

    # Coin type: 91
    # Symbol: BSD
    # Coin: BitSend
    BitSend = (91,), "BitSend", "BSD"

    # Coin type: 92
    # Symbol: UNO
    # Coin: Unobtanium
    Unobtanium = (92,), "Unobtanium", "UNO"

    # Coin type: 93
    # Symbol: MTR
    # Coin: MasterTrader
    MasterTrader = (93,), "MasterTrader", "MTR"

    # Coin type: 94
    # Symbol: GB
    # Coin: GoldBlocks
    GoldBlocks = (94,), "GoldBlocks", "GB"

    # Coin type: 95
    # Symbol: SAM
    # Coin: Samaritan
    Samaritan = (95,), "Samaritan", "SAM"

    # Coin type: 105
    # Symbol: STRAT
    # Coin: Stratis
    Stratis = (105,), "Stratis", "STRAT"

    # Coin type: 108
    # Symbol: UBQ
    # Coin: Ubiq
    Ubiq = (108,), "Ubiq", "UBQ"

    # Coin type: 111
    # Symbol: ARK
    # Coin: Ark
    Ark = (111,), "Ark", "ARK"

    # Coin type: 118
    # Symbol: ATOM
    # Coin: Atom
    Atom = (118,), "Atom", "ATOM"

    # Coin type: 121
    # Symbol: ZEN
    # Coin: Horizen
    Horizen = (121,), "Horizen", "ZEN"

    # Coin type: 128
    # Symbol: XMR
    # Coin: Monero
    Monero = (128,), "Monero", "XMR"

    # Coin type: 133
    # Symbol: ZEC
    # Coin: Zcash
    Zcash = (133,), "Zcash", "ZEC"

    # Coin type: 134
    # Symbol: LSK
    # Coin: Lisk
    Lisk = (134,), "Lisk", "LSK"

    # Coin type: 135
    # Symbol: STEEM
    # Coin: Steem
    Steem = (135,), "Steem", "STEEM"

    # Coin type: 136
    # Symbol: FIRO
    # Coin: Firo
    Firo = (136,), "Firo", "FIRO"

    # Coin type: 137
    # Symbol: RBTC
    # Coin: RSK
    RSK = (137,), "RSK", "RBTC"

    # Coin type: 141
    # Symbol: KMD
    # Coin: Komodo
    Komodo = (141,), "Komodo", "KMD"

    # Coin type: 144
    # Symbol: XRP
    # Coin: XRP
    XRP = (144,), "XRP", "XRP"

    # Coin type: 145
    # Symbol: BCH
    # Coin: Bitcoin Cash
    BitcoinCash = (145,), "Bitcoin Cash", "BCH"

    # Coin type: 148
    # Symbol: XLM
    # Coin: Stellar Lumens
    StellarLumens = (148,), "Stellar Lumens", "XLM"

    # Coin type: 153
    # Symbol: BTM
    # Coin: Bytom
    Bytom = (153,), "Bytom", "BTM"

    # Coin type: 156
    # Symbol: BTG
    # Coin: Bitcoin Gold
    BitcoinGold = (156,), "Bitcoin Gold", "BTG"

    # Coin type: 165
    # Symbol: XNO
    # Coin: Nano
    Nano = (165,), "Nano", "XNO"

    # Coin type: 175
    # Symbol: RVN
    # Coin: Ravencoin
    Ravencoin = (175,), "Ravencoin", "RVN"

    # Coin type: 192
    # Symbol: LCC
    # Coin: Litecoin Cash
    LitecoinCash = (192,), "Litecoin Cash", "LCC"

    # Coin type: 194
    # Symbol: EOS
    # Coin: EOS
    EOS = (194,), "EOS", "EOS"

    # Coin type: 195
    # Symbol: TRX
    # Coin: Tron
    Tron = (195,), "Tron", "TRX"

    # Coin type: 235
    # Symbol: FIO
    # Coin: FIO
    FIO = (235,), "FIO", "FIO"

    # Coin type: 236
    # Symbol: BSV
    # Coin: BitcoinSV
    BitcoinSV = (236,), "BitcoinSV", "BSV"

    # Coin type: 242
    # Symbol: NIM
    # Coin: Nimiq
    Nimiq = (242,), "Nimiq", "NIM"

    # Coin type: 246
    # Symbol: ENRG
    # Coin: Energi
    Energi = (246,), "Energi", "ENRG"

    # Coin type: 283
    # Symbol: ALGO
    # Coin: Algorand
    Algorand = (283,), "Algorand", "ALGO"

    # Coin type: 291
    # Symbol: IOST
    # Coin: IOST
    IOST = (291,), "IOST", "IOST"

    # Coin type: 304
    # Symbol: IOTX
    # Coin: IoTeX
    IoTeX = (304,), "IoTeX", "IOTX"

    # Coin type: 313
    # Symbol: ZIL
    # Coin: Zilliqa
    Zilliqa = (313,), "Zilliqa", "ZIL"

    # Coin type: 330
    # Symbol: LUNA
    # Coin: Terra
    Terra = (330,), "Terra", "LUNA"

    # Coin type: 354
    # Symbol: DOT
    # Coin: Polkadot
    Polkadot = (354,), "Polkadot", "DOT"

    # Coin type: 394
    # Symbol: CRO
    # Coin: Crypto.org Chain
    CryptoOrgChain = (394,), "Crypto.org Chain", "CRO"

    # Coin type: 397
    # Symbol: NEAR
    # Coin: NEAR Protocol
    NEARProtocol = (397,), "NEAR Protocol", "NEAR"

    # Coin type: 425
    # Symbol: AION
    # Coin: Aion
    Aion = (425,), "Aion", "AION"

    # Coin type: 434
    # Symbol: KSM
    # Coin: Kusama
    Kusama = (434,), "Kusama", "KSM"

    # Coin type: 457
    # Symbol: AE
    # Coin: æternity
    aeternity = (457,), "æternity", "AE"

    # Coin type: 459
    # Symbol: KAVA
    # Coin: Kava
    Kava = (459,), "Kava", "KAVA"

    # Coin type: 461
    # Symbol: FIL
    # Coin: Filecoin
    Filecoin = (461,), "Filecoin", "FIL"

    # Coin type: 472
    # Symbol: AR
    # Coin: Arweave
    Arweave = (472,), "Arweave", "AR"

    # Coin type: 500
    # Symbol: THETA
    # Coin: Theta
    Theta = (500,), "Theta", "THETA"

    # Coin type: 501
    # Symbol: SOL
    # Coin: Solana
    Solana = (501,), "Solana", "SOL"

    # Coin type: 508
    # Symbol: EGLD
    # Coin: MultiversX
    MultiversX = (508,), "MultiversX", "EGLD"

    # Coin type: 529
    # Symbol: SCRT
    # Coin: Secret Network
    SecretNetwork = (529,), "Secret Network", "SCRT"

    # Coin type: 637
    # Symbol: APT
    # Coin: Aptos
    Aptos = (637,), "Aptos", "APT"

    # Coin type: 714
    # Symbol: BNB
    # Coin: Binance
    Binance = (714,), "Binance", "BNB"

    # Coin type: 784
    # Symbol: SUI
    # Coin: Sui
    Sui = (784,), "Sui", "SUI"

    # Coin type: 818
    # Symbol: VET
    # Coin: VeChain Token
    VeChainToken = (818,), "VeChain Token", "VET"

    # Coin type: 820
    # Symbol: CLO
    # Coin: Callisto
    Callisto = (820,), "Callisto", "CLO"

    # Coin type: 888
    # Symbol: NEO
    # Coin: NEO
    NEO = (888,), "NEO", "NEO"

    # Coin type: 931
    # Symbol: RUNE
    # Coin: THORChain
    THORChain = (931,), "THORChain", "RUNE"

    # Coin type: 966
    # Symbol: MATIC
    # Coin: Polygon
    Polygon = (966,), "Polygon", "MATIC"

    # Coin type: 1001
    # Symbol: TT
    # Coin: ThunderCore
    ThunderCore = (1001,), "ThunderCore", "TT"

    # Coin type: 1007
    # Symbol: FTM
    # Coin: Fantom
    Fantom = (1007,), "Fantom", "FTM"

    # Coin type: 1023
    # Symbol: ONE
    # Coin: HARMONY-ONE
    HarmonyOne = (1023,), "HARMONY-ONE", "ONE"

    # Coin type: 1024
    # Symbol: ONT
    # Coin: Ontology
    Ontology = (1024,), "Ontology", "ONT"

    # Coin type: 1729
    # Symbol: XTZ
    # Coin: Tezos
    Tezos = (1729,), "Tezos", "XTZ"

    # Coin type: 1815
    # Symbol: ADA
    # Coin: Cardano
    Cardano = (1815,), "Cardano", "ADA"

    # Coin type: 2305
    # Symbol: ELA
    # Coin: Elastos
    Elastos = (2305,), "Elastos", "ELA"

    # Coin type: 2718
    # Symbol: NAS
    # Coin: Nebulas
    Nebulas = (2718,), "Nebulas", "NAS"

    # Coin type: 3030
    # Symbol: HBAR
    # Coin: Hedera HBAR
    HederaHBAR = (3030,), "Hedera HBAR", "HBAR"

    # Coin type: 4218
    # Symbol: IOTA
    # Coin: IOTA
    IOTA = (4218,), "IOTA", "IOTA"

    # Coin type: 4219
    # Symbol: SMR
    # Coin: Shimmer
    Shimmer = (4219,), "Shimmer", "SMR"

    # Coin type: 5353
    # Symbol: HNS
    # Coin: Handshake
    Handshake = (5353,), "Handshake", "HNS"

    # Coin type: 5757
    # Symbol: STX
    # Coin: Stacks
    Stacks = (5757,), "Stacks", "STX"

    # Coin type: 6060
    # Symbol: GO
    # Coin: GoChain
    GoChain = (6060,), "GoChain", "GO"

    # Coin type: 8217
    # Symbol: KLAY
    # Coin: Klaytn
    Klaytn = (8217,), "Klaytn", "KLAY"

    # Coin type: 9000
    # Symbol: AVAX
    # Coin: Avalanche
    Avalanche = (9000,), "Avalanche", "AVAX"

    # Coin type: 19167
    # Symbol: FLUX
    # Coin: Flux
    Flux = (19167,), "Flux", "FLUX"

    # Coin type: 52752
    # Symbol: CELO
    # Coin: Celo
    Celo = (52752,), "Celo", "CELO"

    # Coin type: 99999
    # Symbol: WICC
    # Coin: Waykichain
    Waykichain = (99999,), "Waykichain", "WICC"

    # Coin type: 246529
    # Symbol: ATS
    # Coin: ARTIS sigma1
    ARTISsigma1 = (246529,), "ARTIS sigma1", "ATS"

    # Coin type: 1313114
    # Symbol: ETHO
    # Coin: Etho Protocol
    EthoProtocol = (1313114,), "Etho Protocol", "ETHO"

    # Coin type: 5718350
    # Symbol: WAN
    # Coin: Wanchain
    Wanchain = (5718350,), "Wanchain", "WAN"

    # Coin type: 5741564
    # Symbol: WAVES
    # Coin: Waves
    Waves = (5741564,), "Waves", "WAVES"


@unique
class Symbol(SymbolType):
    BTC = 0, Coin.Bitcoin
    LTC = 2, Coin.Litecoin
    DOGE = 3, Coin.Dogecoin
    RDD = 4, Coin.Reddcoin
    DASH = 5, Coin.Dash
    PPC = 6, Coin.Peercoin
    NMC = 7, Coin.Namecoin
    FTC = 8, Coin.Feathercoin
    XCP = 9, Coin.Counterparty
    BLK = 10, Coin.Blackcoin
    NSR = 11, Coin.NuShares
    NBT = 12, Coin.NuBits
    MZC = 13, Coin.Mazacoin
    VIA = 14, Coin.Viacoin
    XCH = 15, Coin.ClearingHouse
    RBY = 16, Coin.Rubycoin
    GRS = 17, Coin.Groestlcoin
    DGC = 18, Coin.Digitalcoin
    CCN = 19, Coin.Cannacoin
    DGB = 20, Coin.DigiByte
    MONA = 22, Coin.Monacoin
    CLAM = 23, Coin.Clams
    XPM = 24, Coin.Primecoin
    NEOS = 25, Coin.Neoscoin
    JBS = 26, Coin.Jumbucks
    ZRC = 27, Coin.ziftrCOIN
    VTC = 28, Coin.Vertcoin
    NXT = 29, Coin.NXT
    BURST = 30, Coin.Burst
    MUE = 31, Coin.MonetaryUnit
    ZOOM = 32, Coin.Zoom
    VASH = 33, Coin.VirtualCash
    CDN = 34, Coin.CanadaeCoin
    SDC = 35, Coin.ShadowCash
    PKB = 36, Coin.ParkByte
    PND = 37, Coin.Pandacoin
    START = 38, Coin.StartCOIN
    MOIN = 39, Coin.MOIN
    EXP = 40, Coin.Expanse
    EMC2 = 41, Coin.Einsteinium
    DCR = 42, Coin.Decred
    XEM = 43, Coin.NEM
    PART = 44, Coin.Particl
    ARG = 45, Coin.Argentum
    SHR = 48, Coin.Shreeji
    GCR = 49, Coin.GlobalCurrencyReserve
    NVC = 50, Coin.Novacoin
    AC = 51, Coin.Asiacoin
    BTCD = 52, Coin.BitcoinDark
    DOPE = 53, Coin.Dopecoin
    TPC = 54, Coin.Templecoin
    AIB = 55, Coin.AIB
    EDRC = 56, Coin.EDRCoin
    SYS = 57, Coin.Syscoin
    SLR = 58, Coin.Solarcoin
    SMLY = 59, Coin.Smileycoin
    ETH = 60, Coin.Ethereum
    ETC = 61, Coin.EthereumClassic
    PSB = 62, Coin.Pesobit
    LDCN = 63, Coin.Landcoin
    XBC = 65, Coin.Bitcoinplus
    IOP = 66, Coin.InternetofPeople
    NXS = 67, Coin.Nexus
    INSN = 68, Coin.InsaneCoin
    OK = 69, Coin.OKCash
    BRIT = 70, Coin.BritCoin
    CMP = 71, Coin.Compcoin
    CRW = 72, Coin.Crown
    BELA = 73, Coin.BelaCoin
    ICX = 74, Coin.ICON
    FJC = 75, Coin.FujiCoin
    MIX = 76, Coin.MIX
    XVG = 77, Coin.VergeCurrency
    EFL = 78, Coin.ElectronicGulden
    CLUB = 79, Coin.ClubCoin
    RICHX = 80, Coin.RichCoin
    POT = 81, Coin.Potcoin
    QRK = 82, Coin.Quarkcoin
    TRC = 83, Coin.Terracoin
    GRC = 84, Coin.Gridcoin
    AUR = 85, Coin.Auroracoin
    IXC = 86, Coin.IXCoin
    NLG = 87, Coin.Gulden
    QTUM = 88, Coin.QTUM
    BTA = 89, Coin.Bata
    XMY = 90, Coin.Myriadcoin
    BSD = 91, Coin.BitSend
    UNO = 92, Coin.Unobtanium
    MTR = 93, Coin.MasterTrader
    GB = 94, Coin.GoldBlocks
    SAM = 95, Coin.Samaritan
    STRAT = 105, Coin.Stratis
    UBQ = 108, Coin.Ubiq
    ARK = 111, Coin.Ark
    ATOM = 118, Coin.Atom
    ZEN = 121, Coin.Horizen
    XMR = 128, Coin.Monero
    ZEC = 133, Coin.Zcash
    LSK = 134, Coin.Lisk
    STEEM = 135, Coin.Steem
    FIRO = 136, Coin.Firo
    RBTC = 137, Coin.RSK
    KMD = 141, Coin.Komodo
    XRP = 144, Coin.XRP
    BCH = 145, Coin.BitcoinCash
    XLM = 148, Coin.StellarLumens
    BTM = 153, Coin.Bytom
    BTG = 156, Coin.BitcoinGold
    XNO = 165, Coin.Nano
    RVN = 175, Coin.Ravencoin
    LCC = 192, Coin.LitecoinCash
    EOS = 194, Coin.EOS
    TRX = 195, Coin.Tron
    FIO = 235, Coin.FIO
    BSV = 236, Coin.BitcoinSV
    NIM = 242, Coin.Nimiq
    ENRG = 246, Coin.Energi
    ALGO = 283, Coin.Algorand
    IOST = 291, Coin.IOST
    IOTX = 304, Coin.IoTeX
    ZIL = 313, Coin.Zilliqa
    LUNA = 330, Coin.Terra
    DOT = 354, Coin.Polkadot
    CRO = 394, Coin.CryptoOrgChain
    NEAR = 397, Coin.NEARProtocol
    AION = 425, Coin.Aion
    KSM = 434, Coin.Kusama
    AE = 457, Coin.aeternity
    KAVA = 459, Coin.Kava
    FIL = 461, Coin.Filecoin
    AR = 472, Coin.Arweave
    THETA = 500, Coin.Theta
    SOL = 501, Coin.Solana
    EGLD = 508, Coin.MultiversX
    SCRT = 529, Coin.SecretNetwork
    APT = 637, Coin.Aptos
    BNB = 714, Coin.Binance
    SUI = 784, Coin.Sui
    VET = 818, Coin.VeChainToken
    CLO = 820, Coin.Callisto
    NEO = 888, Coin.NEO
    RUNE = 931, Coin.THORChain
    MATIC = 966, Coin.Polygon
    TT = 1001, Coin.ThunderCore
    FTM = 1007, Coin.Fantom
    ONE = 1023, Coin.HarmonyOne
    ONT = 1024, Coin.Ontology
    XTZ = 1729, Coin.Tezos
    ADA = 1815, Coin.Cardano
    ELA = 2305, Coin.Elastos
    NAS = 2718, Coin.Nebulas
    HBAR = 3030, Coin.HederaHBAR
    IOTA = 4218, Coin.IOTA
    SMR = 4219, Coin.Shimmer
    HNS = 5353, Coin.Handshake
    STX = 5757, Coin.Stacks
    GO = 6060, Coin.GoChain
    KLAY = 8217, Coin.Klaytn
    AVAX = 9000, Coin.Avalanche
    FLUX = 19167, Coin.Flux
    CELO = 52752, Coin.Celo
    WICC = 99999, Coin.Waykichain
    ATS = 246529, Coin.ARTISsigma1
    ETHO = 1313114, Coin.EthoProtocol
    WAN = 5718350, Coin.Wanchain
    WAVES = 5741564, Coin.Waves
