"""GraphQL query templates sent verbatim to the gnomAD API."""

_CONSTRAINT_FIELDS = """
          exp_lof
          exp_mis
          exp_syn
          obs_lof
          obs_mis
          obs_syn
          oe_lof
          oe_lof_lower
          oe_lof_upper
          oe_mis
          oe_mis_lower
          oe_mis_upper
          oe_syn
          oe_syn_lower
          oe_syn_upper
          lof_z
          mis_z
          syn_z
          pLI"""

_FREQUENCY_FIELDS = """
          ac
          an
          ac_hemi
          ac_hom
          faf95 {
            popmax
            popmax_population
          }
          filters
          populations {
            id
            ac
            an
            ac_hemi
            ac_hom
          }"""

_VARIANT_SUMMARY_FIELDS = """
          variant_id
          pos
          rsids
          consequence
          hgvsc
          hgvsp
          lof
          exome {
            ac
            an
            af
            filters
          }
          genome {
            ac
            an
            af
            filters
          }"""

_COVERAGE_BIN_FIELDS = """
            pos
            mean
            median
            over_1
            over_5
            over_10
            over_15
            over_20
            over_25
            over_30
            over_50
            over_100"""

SEARCH = """
    query SearchGene($query: String!, $referenceGenome: ReferenceGenomeId!) {
      searchResults(query: $query, referenceGenome: $referenceGenome) {
        label
        value: url
      }
    }
"""

GET_GENE = f"""
    query GetGene($geneId: String, $geneSymbol: String, $referenceGenome: ReferenceGenomeId!) {{
      gene(gene_id: $geneId, gene_symbol: $geneSymbol, reference_genome: $referenceGenome) {{
        gene_id
        symbol
        name
        canonical_transcript_id
        hgnc_id
        omim_id
        chrom
        start
        stop
        strand
        gnomad_constraint {{{_CONSTRAINT_FIELDS}
        }}
        transcripts {{
          transcript_id
          transcript_version
          reference_genome
        }}
      }}
    }}
"""

GET_VARIANT = f"""
    query GetVariant($variantId: String!, $datasetId: DatasetId!) {{
      variant(variantId: $variantId, dataset: $datasetId) {{
        variant_id
        reference_genome
        chrom
        pos
        ref
        alt
        rsids
        caid
        colocated_variants
        multi_nucleotide_variants {{
          combined_variant_id
          changes_amino_acids
          n_individuals
          other_constituent_snvs
        }}
        exome {{{_FREQUENCY_FIELDS}
        }}
        genome {{{_FREQUENCY_FIELDS}
        }}
        transcript_consequences {{
          gene_id
          gene_symbol
          transcript_id
          consequence_terms
          is_canonical
          major_consequence
          polyphen_prediction
          sift_prediction
          lof
          lof_filter
          lof_flags
        }}
      }}
    }}
"""

GET_VARIANTS_IN_GENE = f"""
    query GetVariantsInGene($geneId: String, $geneSymbol: String, $datasetId: DatasetId!, $referenceGenome: ReferenceGenomeId!) {{
      gene(gene_id: $geneId, gene_symbol: $geneSymbol, reference_genome: $referenceGenome) {{
        variants(dataset: $datasetId) {{{_VARIANT_SUMMARY_FIELDS}
        }}
      }}
    }}
"""

GET_TRANSCRIPT = f"""
    query GetTranscript($transcriptId: String!, $referenceGenome: ReferenceGenomeId!) {{
      transcript(transcript_id: $transcriptId, reference_genome: $referenceGenome) {{
        transcript_id
        transcript_version
        reference_genome
        chrom
        start
        stop
        strand
        gene_id
        gene_symbol
        gene_version
        gnomad_constraint {{{_CONSTRAINT_FIELDS}
        }}
      }}
    }}
"""

GET_REGION_VARIANTS = f"""
    query GetRegionVariants($chrom: String!, $start: Int!, $stop: Int!, $datasetId: DatasetId!, $referenceGenome: ReferenceGenomeId!) {{
      region(chrom: $chrom, start: $start, stop: $stop, reference_genome: $referenceGenome) {{
        variants(dataset: $datasetId) {{{_VARIANT_SUMMARY_FIELDS}
        }}
      }}
    }}
"""

GET_COVERAGE = f"""
    query GetCoverage($geneId: String, $geneSymbol: String, $datasetId: DatasetId!, $referenceGenome: ReferenceGenomeId!) {{
      gene(gene_id: $geneId, gene_symbol: $geneSymbol, reference_genome: $referenceGenome) {{
        coverage(dataset: $datasetId) {{
          exome {{{_COVERAGE_BIN_FIELDS}
          }}
          genome {{{_COVERAGE_BIN_FIELDS}
          }}
        }}
      }}
    }}
"""

GET_STRUCTURAL_VARIANTS = """
    query GetStructuralVariants($chrom: String!, $start: Int!, $stop: Int!, $datasetId: DatasetId!, $referenceGenome: ReferenceGenomeId!) {
      region(chrom: $chrom, start: $start, stop: $stop, reference_genome: $referenceGenome) {
        structural_variants(dataset: $datasetId) {
          variant_id
          chrom
          pos
          end
          length
          type
          alts
          ac
          an
          af
          homozygote_count
          hemizygote_count
          filters
        }
      }
    }
"""

GET_MITOCHONDRIAL_VARIANTS = """
    query GetMitochondrialVariants($datasetId: DatasetId!) {
      mitochondrial_variants(dataset: $datasetId) {
        variant_id
        pos
        ref
        alt
        rsids
        ac_het
        ac_hom
        an
        af_het
        af_hom
        max_heteroplasmy
        filters
      }
    }
"""
