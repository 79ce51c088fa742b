# src/kedro_builder/core/model/types.py
"""
Enums canônicos do modelo e catálogo de formatos de dataset.

Os valores textuais são os mesmos persistidos pela camada de estado
(ex.: `"csv"`, `"01_raw"`, `"data_processing"`), de modo que um documento
salvo pode ser lido sem tradução.

O catálogo `DATASET_TYPE_SPECS` associa cada `DatasetType` a:
    - a classe do kedro-datasets usada no `catalog.yml`
    - a extensão padrão de arquivo (quando o formato é baseado em arquivo)
    - um rótulo e uma categoria para exibição
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class NodeCategory(str, Enum):
    """
    Classificação semântica de um node.

    Puramente informativa: não altera validação nem geração.
    """
    DATA_INGESTION = "data_ingestion"
    DATA_PROCESSING = "data_processing"
    MODEL_TRAINING = "model_training"
    MODEL_EVALUATION = "model_evaluation"
    CUSTOM = "custom"


class DataLayer(str, Enum):
    """As oito camadas convencionais de dados de um projeto Kedro."""
    RAW = "01_raw"
    INTERMEDIATE = "02_intermediate"
    PRIMARY = "03_primary"
    FEATURE = "04_feature"
    MODEL_INPUT = "05_model_input"
    MODELS = "06_models"
    MODEL_OUTPUT = "07_model_output"
    REPORTING = "08_reporting"

    @property
    def label(self) -> str:
        """Nome da camada sem o prefixo numérico (ex.: `model_input`)."""
        return self.value.split("_", 1)[1]


DATA_LAYERS: Tuple[str, ...] = tuple(layer.value for layer in DataLayer)


class DatasetType(str, Enum):
    """Formatos suportados de dataset (kedro-datasets 3.0+)."""
    # Pandas
    CSV = "csv"
    PARQUET = "parquet"
    JSON = "json"
    EXCEL = "excel"
    FEATHER = "feather"
    HDF = "hdf"
    SQL_TABLE = "sql_table"
    SQL_QUERY = "sql_query"
    GBQ_TABLE = "gbq_table"
    GBQ_QUERY = "gbq_query"
    # Spark
    SPARK_DATAFRAME = "spark_dataframe"
    SPARK_HIVE = "spark_hive"
    SPARK_JDBC = "spark_jdbc"
    # Delta Lake
    DELTA_TABLE = "delta_table"
    # Serialização / texto
    PICKLE = "pickle"
    TEXT = "text"
    YAML = "yaml"
    XML = "xml"
    # Imagem e visualização
    IMAGE = "image"
    MATPLOTLIB = "matplotlib"
    PLOTLY_JSON = "plotly_json"
    VIDEO = "video"
    HOLOVIEWS = "holoviews"
    # Grafos
    NETWORKX_JSON = "networkx_json"
    NETWORKX_GML = "networkx_gml"
    NETWORKX_GRAPHML = "networkx_graphml"
    # API e tracking
    API = "api"
    TRACKING = "tracking"
    # Polars
    POLARS_CSV = "polars_csv"
    POLARS_PARQUET = "polars_parquet"
    POLARS_LAZY = "polars_lazy"
    # Dask
    DASK_PARQUET = "dask_parquet"
    DASK_CSV = "dask_csv"
    # Geoespacial / científico
    GEOJSON = "geojson"
    BIOSEQUENCE = "biosequence"
    MATLAB = "matlab"
    # Modelos de ML
    TENSORFLOW = "tensorflow"
    PYTORCH = "pytorch"
    HUGGINGFACE_DATASET = "huggingface_dataset"
    HUGGINGFACE_MODEL = "huggingface_model"
    # Banco de dados
    IBIS_TABLE = "ibis_table"
    # Em memória (sem arquivo, sem entrada no catálogo)
    MEMORY = "memory"


MEMORY_DATASET_TYPE = DatasetType.MEMORY.value


@dataclass(frozen=True)
class DatasetTypeSpec:
    """Como um formato é declarado no `catalog.yml`."""

    kedro_type: str
    extension: Optional[str]
    label: str
    category: str

    @property
    def file_based(self) -> bool:
        return self.extension is not None


def _spec(kedro_type: str, extension: Optional[str], label: str, category: str) -> DatasetTypeSpec:
    return DatasetTypeSpec(kedro_type=kedro_type, extension=extension, label=label, category=category)


DATASET_TYPE_SPECS: Dict[str, DatasetTypeSpec] = {
    "csv": _spec("pandas.CSVDataset", ".csv", "CSV", "Pandas"),
    "parquet": _spec("pandas.ParquetDataset", ".parquet", "Parquet", "Pandas"),
    "json": _spec("pandas.JSONDataset", ".json", "JSON", "Pandas"),
    "excel": _spec("pandas.ExcelDataset", ".xlsx", "Excel (XLSX/XLS)", "Pandas"),
    "feather": _spec("pandas.FeatherDataset", ".feather", "Feather", "Pandas"),
    "hdf": _spec("pandas.HDFDataset", ".h5", "HDF5", "Pandas"),
    "sql_table": _spec("pandas.SQLTableDataset", None, "SQL Table", "Pandas"),
    "sql_query": _spec("pandas.SQLQueryDataset", None, "SQL Query", "Pandas"),
    "gbq_table": _spec("pandas.GBQTableDataset", None, "Google BigQuery Table", "Pandas"),
    "gbq_query": _spec("pandas.GBQQueryDataset", None, "Google BigQuery Query", "Pandas"),
    "spark_dataframe": _spec("spark.SparkDataset", ".parquet", "Spark DataFrame", "Spark"),
    "spark_hive": _spec("spark.SparkHiveDataset", None, "Spark Hive Table", "Spark"),
    "spark_jdbc": _spec("spark.SparkJDBCDataset", None, "Spark JDBC", "Spark"),
    "delta_table": _spec("spark.DeltaTableDataset", "", "Delta Table", "Delta Lake"),
    "pickle": _spec("pickle.PickleDataset", ".pkl", "Pickle (Binary)", "Serialization"),
    "text": _spec("text.TextDataset", ".txt", "Text File", "Text"),
    "yaml": _spec("yaml.YAMLDataset", ".yml", "YAML", "Text"),
    "xml": _spec("pandas.XMLDataset", ".xml", "XML", "Text"),
    "image": _spec("pillow.ImageDataset", ".png", "Image (PNG/JPG/etc)", "Image & Video"),
    "matplotlib": _spec("matplotlib.MatplotlibDataset", ".png", "Matplotlib Figure", "Image & Video"),
    "plotly_json": _spec("plotly.JSONDataset", ".json", "Plotly JSON", "Image & Video"),
    "video": _spec("video.VideoDataset", ".mp4", "Video", "Image & Video"),
    "holoviews": _spec("holoviews.HoloviewsWriter", ".png", "Holoviews", "Image & Video"),
    "networkx_json": _spec("networkx.JSONDataset", ".json", "NetworkX JSON", "Graph"),
    "networkx_gml": _spec("networkx.GMLDataset", ".gml", "NetworkX GML", "Graph"),
    "networkx_graphml": _spec("networkx.GraphMLDataset", ".graphml", "NetworkX GraphML", "Graph"),
    "api": _spec("api.APIDataset", None, "API Dataset", "API & Cloud"),
    "tracking": _spec("tracking.MetricsDataset", ".json", "Tracking Dataset", "API & Cloud"),
    "polars_csv": _spec("polars.CSVDataset", ".csv", "Polars CSV", "Polars"),
    "polars_parquet": _spec("polars.EagerPolarsDataset", ".parquet", "Polars Parquet", "Polars"),
    "polars_lazy": _spec("polars.LazyPolarsDataset", ".parquet", "Polars LazyFrame", "Polars"),
    "dask_parquet": _spec("dask.ParquetDataset", ".parquet", "Dask Parquet", "Dask"),
    "dask_csv": _spec("dask.CSVDataset", ".csv", "Dask CSV", "Dask"),
    "geojson": _spec("geopandas.GenericDataset", ".geojson", "GeoJSON", "Geospatial"),
    "biosequence": _spec("biosequence.BioSequenceDataset", ".fasta", "Bio Sequence (BioPython)", "Scientific"),
    "matlab": _spec("matlab.MatlabDataset", ".mat", "MATLAB (.mat)", "Scientific"),
    "tensorflow": _spec("tensorflow.TensorFlowModelDataset", "", "TensorFlow Model", "ML Models"),
    "pytorch": _spec("pickle.PickleDataset", ".pt", "PyTorch Model", "ML Models"),
    "huggingface_dataset": _spec("huggingface.HFDataset", None, "Hugging Face Dataset", "ML Models"),
    "huggingface_model": _spec("huggingface.HFTransformerPipelineDataset", None, "Hugging Face Model", "ML Models"),
    "ibis_table": _spec("ibis.TableDataset", None, "Ibis Table", "Database"),
    "memory": _spec("MemoryDataset", None, "Memory (In-Memory)", "Memory"),
}


def dataset_type_spec(type_tag: Optional[str]) -> Optional[DatasetTypeSpec]:
    """Retorna a descrição do formato, ou None para tags ausentes/desconhecidas."""
    if not type_tag:
        return None
    return DATASET_TYPE_SPECS.get(str(type_tag))


def node_category(tag: Optional[str]) -> NodeCategory:
    """Categoria do node; tags ausentes ou desconhecidas viram `custom`."""
    try:
        return NodeCategory(tag)
    except ValueError:
        return NodeCategory.CUSTOM
